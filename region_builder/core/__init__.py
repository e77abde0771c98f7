"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants and defaults
- exceptions: Build exception hierarchy
"""
