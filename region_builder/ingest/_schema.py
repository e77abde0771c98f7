"""JSON Schema validation of region geometry.

The validator is built once per build from two schema documents:

- the GeoJSON envelope schema, registered under ``GEOJSON_SCHEMA_URI`` so
  other schemas can ``$ref`` its definitions;
- the region geometry schema every ``{type, coordinates}`` value is
  checked against.

Both default to the copies packaged under ``region_builder/schemas``.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for
from referencing import Registry, Resource
from referencing.exceptions import CannotDetermineSpecification
from referencing.jsonschema import DRAFT7

from region_builder.core.constants import (
    GEOJSON_SCHEMA_FILE,
    GEOJSON_SCHEMA_URI,
    GEOMETRY_SCHEMA_FILE,
)
from region_builder.ingest._errors import SchemaLoadError, SchemaValidationError

logger = logging.getLogger("region_builder.ingest.schema")


@dataclass(frozen=True, slots=True)
class SchemaViolation:
    """One schema error, located by JSON path when attributable."""

    property: str
    message: str

    def __str__(self) -> str:
        if self.property:
            return f"{self.property} {self.message}"
        return self.message


# ---------------------------------------------------------------------------
# Schema loading
# ---------------------------------------------------------------------------


def load_schema(path: Path | str) -> dict[str, Any]:
    """Load a schema document from disk.

    Raises:
        SchemaLoadError: If the file cannot be read or is not a JSON object.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            schema = json.load(fh)
    except (OSError, ValueError) as exc:
        msg = f"Cannot load schema: {exc}"
        raise SchemaLoadError(msg, path=path) from exc
    if not isinstance(schema, dict):
        msg = "Schema document must be a JSON object"
        raise SchemaLoadError(msg, path=path)
    return schema


def load_packaged_schema(name: str) -> dict[str, Any]:
    """Load one of the schema documents shipped with the package."""
    text = resources.files("region_builder.schemas").joinpath(name).read_text(encoding="utf-8")
    return json.loads(text)


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


def _is_finite_number(checker: Any, instance: object) -> bool:
    return (
        isinstance(instance, int | float)
        and not isinstance(instance, bool)
        and math.isfinite(instance)
    )


def _finite_numbers(validator_cls: Any) -> Any:
    """Extend *validator_cls* so ``"type": "number"`` rejects NaN and infinities."""
    type_checker = validator_cls.TYPE_CHECKER.redefine("number", _is_finite_number)
    return validators.extend(validator_cls, type_checker=type_checker)


class SchemaValidator:
    """Validates region geometry against the geometry schema.

    Construct one per build and pass it to ``build_regions``.

    Raises:
        SchemaLoadError: If either document is not a valid JSON Schema.
    """

    def __init__(
        self,
        geometry_schema: dict[str, Any],
        geojson_schema: dict[str, Any],
        *,
        geojson_uri: str = GEOJSON_SCHEMA_URI,
    ) -> None:
        for schema in (geojson_schema, geometry_schema):
            try:
                validator_for(schema, default=Draft7Validator).check_schema(schema)
            except SchemaError as exc:
                msg = f"Invalid JSON Schema: {exc.message}"
                raise SchemaLoadError(msg) from exc

        try:
            resource = Resource.from_contents(geojson_schema, default_specification=DRAFT7)
        except CannotDetermineSpecification as exc:
            msg = f"Unsupported $schema in GeoJSON schema: {exc}"
            raise SchemaLoadError(msg) from exc

        registry: Registry = Registry().with_resource(geojson_uri, resource)
        validator_cls = _finite_numbers(validator_for(geometry_schema, default=Draft7Validator))
        self._validator = validator_cls(geometry_schema, registry=registry)
        logger.debug("Schema validator ready (GeoJSON schema registered as %s)", geojson_uri)

    @classmethod
    def from_files(
        cls, geometry_schema_path: Path | str, geojson_schema_path: Path | str
    ) -> SchemaValidator:
        """Build a validator from schema documents on disk."""
        return cls(load_schema(geometry_schema_path), load_schema(geojson_schema_path))

    @classmethod
    def default(cls) -> SchemaValidator:
        """Build a validator from the packaged schema documents."""
        return cls(
            load_packaged_schema(GEOMETRY_SCHEMA_FILE),
            load_packaged_schema(GEOJSON_SCHEMA_FILE),
        )

    def iter_errors(self, value: object) -> list[SchemaViolation]:
        """Return every schema violation of *value* (empty when valid)."""
        violations: list[SchemaViolation] = []
        for error in self._validator.iter_errors(value):
            prop = error.json_path if error.absolute_path else ""
            violations.append(SchemaViolation(property=prop, message=error.message))
        return violations

    def validate(self, value: object, path: Path | str) -> None:
        """Validate *value* read from *path*.

        Raises:
            SchemaValidationError: Carrying every violation found.
        """
        violations = self.iter_errors(value)
        if violations:
            raise SchemaValidationError(path, [str(v) for v in violations])
