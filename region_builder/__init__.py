"""Region boundary build.

Ingests a directory tree of hand-authored ``.geojson`` region boundaries,
normalizes winding and precision, validates each against the geometry
schema, and combines them into one ordered region collection.
"""

__version__ = "0.1.0"
