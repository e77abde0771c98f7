"""Schema documents shipped with the package (loaded via ``importlib.resources``)."""
