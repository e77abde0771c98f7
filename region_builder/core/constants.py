"""Shared build constants — single source of truth.

Centralises the defaults shared by the configuration layer, the ingest
stages and the command-line entry point.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Input tree
# ---------------------------------------------------------------------------

DEFAULT_REGIONS_ROOT: str = "assets/regions"
"""Directory scanned for region files when none is given."""

DEFAULT_GEOMETRY_EXTENSION: str = ".geojson"
"""Extension every region file must carry (case-sensitive)."""

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

DEFAULT_PRECISION: int = 5
"""Decimal digits kept on every coordinate value."""

MAX_PRECISION: int = 15
"""Upper bound for the configurable precision (float64 significant digits)."""

# ---------------------------------------------------------------------------
# Schema contracts
# ---------------------------------------------------------------------------

GEOJSON_SCHEMA_URI: str = "http://json.schemastore.org/geojson.json"
"""URI the GeoJSON envelope schema is registered under for ``$ref`` lookups."""

GEOJSON_SCHEMA_FILE: str = "geojson.json"
GEOMETRY_SCHEMA_FILE: str = "geometry.json"

DEFAULT_LOG_LEVEL: str = "INFO"
