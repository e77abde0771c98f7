"""Exceptions raised by the ingest stages (public API, re-exported from __init__)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from region_builder.core.exceptions import PermanentError, ValidationError

if TYPE_CHECKING:
    from pathlib import Path


class DiscoveryError(ValidationError):
    """Raised when the input tree cannot be enumerated."""

    default_stage = "discovery"
    default_code = "REGION_DISCOVERY_FAILED"


class DiscoveryExtensionError(DiscoveryError):
    """Raised when a candidate file does not carry the region extension."""

    default_code = "REGION_EXTENSION_INVALID"


class ParseError(ValidationError):
    """Raised when a region file cannot be read or parsed."""

    default_stage = "parse"
    default_code = "REGION_PARSE_FAILED"


class ShapeError(ValidationError):
    """Base for geometry shape-contract violations."""

    default_stage = "shape"
    default_code = "REGION_SHAPE_INVALID"


class CollectionTypeError(ShapeError):
    """Raised for a GeometryCollection (or legacy ``regions`` container)."""

    default_code = "REGION_COLLECTION_TYPE"


class UnsupportedTypeError(ShapeError):
    """Raised when the geometry type is not Polygon or MultiPolygon."""

    default_code = "REGION_TYPE_UNSUPPORTED"


class MissingCoordinatesError(ShapeError):
    """Raised when a geometry has no coordinates."""

    default_code = "REGION_COORDINATES_MISSING"


class SchemaValidationError(ValidationError):
    """Raised when a region fails the geometry schema.

    Attributes:
        violations: One line per schema error, ``"<property> <message>"``
            or the bare message when no property is attributable.
    """

    default_stage = "schema"
    default_code = "REGION_SCHEMA_INVALID"

    def __init__(self, path: Path | str, violations: list[str]) -> None:
        self.violations = list(violations)
        super().__init__(
            f"Schema validation failed with {len(self.violations)} error(s)",
            path=path,
        )

    def details(self) -> list[str]:
        return [f"{self.path}:", *self.violations]


class SchemaLoadError(PermanentError):
    """Raised when a schema document cannot be read or is not a valid schema."""

    default_stage = "schema"
    default_code = "SCHEMA_LOAD_FAILED"


class DuplicateIdentifierError(ValidationError):
    """Raised when two files share a case-insensitive base filename.

    Attributes:
        identifier: The lowercased base filename both files map to.
        first_path: The file that claimed the identifier first.
    """

    default_stage = "aggregation"
    default_code = "REGION_DUPLICATE_ID"

    def __init__(self, identifier: str, first_path: Path | str, path: Path | str) -> None:
        self.identifier = identifier
        self.first_path = first_path
        super().__init__(f"Duplicate filenames: {identifier}", path=path)

    def details(self) -> list[str]:
        return [str(self.first_path), str(self.path)]
