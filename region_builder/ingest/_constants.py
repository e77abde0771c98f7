"""Shared constants for region ingestion."""

from __future__ import annotations

import re

# Geometry types accepted into the region collection
POLYGON = "Polygon"
MULTI_POLYGON = "MultiPolygon"
ACCEPTED_GEOMETRY_TYPES = frozenset({POLYGON, MULTI_POLYGON})

# Heterogeneous container type that must be unwrapped by the author
GEOMETRY_COLLECTION = "GeometryCollection"

# Legacy nested-collection key
REGIONS_KEY = "regions"

# Non-geometry files allowed to live next to region files
DOCUMENTATION_PATTERN = re.compile(r"\.md$", re.IGNORECASE)
LICENSE_PATTERN = re.compile(r"LICENSE$", re.IGNORECASE)

# Minimum positions for an orientable ring (3 distinct + closing = 4)
MIN_RING_POSITIONS = 4
