"""Region ingestion — composable pipeline stages.

Turns one region file into one validated ``RegionGeometry``. The stages
are split into focused modules:

- **_discovery**: walk the input tree, skip docs/licenses, reject bad extensions
- **_parser**: JSON5 parsing of hand-authored files
- **_normalization**: right-hand-rule rewinding and precision rounding
- **_validation**: Polygon/MultiPolygon shape contract, field stripping
- **_schema**: JSON Schema validation against the geometry contract
- **_aggregation**: duplicate detection and ordered accumulation

Every stage fails loudly: errors carry the offending path and abort the
build (see ``region_builder.pipeline``).
"""

from __future__ import annotations

from region_builder.ingest._aggregation import RegionAggregator, identifier_for
from region_builder.ingest._discovery import is_ignored, iter_region_files
from region_builder.ingest._errors import (
    CollectionTypeError,
    DiscoveryError,
    DiscoveryExtensionError,
    DuplicateIdentifierError,
    MissingCoordinatesError,
    ParseError,
    SchemaLoadError,
    SchemaValidationError,
    ShapeError,
    UnsupportedTypeError,
)
from region_builder.ingest._normalization import (
    extract_regions,
    normalize_geometry,
    orient_ring,
    rewind,
    round_coordinates,
)
from region_builder.ingest._parser import parse_region_file, parse_region_text
from region_builder.ingest._schema import (
    SchemaValidator,
    SchemaViolation,
    load_packaged_schema,
    load_schema,
)
from region_builder.ingest._validation import validate_shape

__all__ = [
    "CollectionTypeError",
    "DiscoveryError",
    "DiscoveryExtensionError",
    "DuplicateIdentifierError",
    "MissingCoordinatesError",
    "ParseError",
    "RegionAggregator",
    "SchemaLoadError",
    "SchemaValidationError",
    "SchemaValidator",
    "SchemaViolation",
    "ShapeError",
    "UnsupportedTypeError",
    "extract_regions",
    "identifier_for",
    "is_ignored",
    "iter_region_files",
    "load_packaged_schema",
    "load_schema",
    "normalize_geometry",
    "orient_ring",
    "parse_region_file",
    "parse_region_text",
    "rewind",
    "round_coordinates",
    "validate_shape",
]
