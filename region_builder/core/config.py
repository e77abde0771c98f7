"""Build configuration loaded from environment variables.

Every value has a default that reproduces the canonical build
(``assets/regions``, 5 decimal digits, packaged schemas). Command-line
options are layered on top via ``BuildConfig.with_overrides``.

Fail-fast validation:
    ``from_env()`` and ``with_overrides()`` raise ``ConfigValidationError``
    if any value is out of its valid range, so a bad setting is caught
    before the first file is read.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass

from region_builder.core.constants import (
    DEFAULT_GEOMETRY_EXTENSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PRECISION,
    DEFAULT_REGIONS_ROOT,
    MAX_PRECISION,
)
from region_builder.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable build configuration.

    Attributes:
        regions_root: Directory scanned recursively for region files.
        precision: Decimal digits kept on every coordinate.
        geometry_extension: Required region file extension (case-sensitive).
        geojson_schema_path: GeoJSON envelope schema; empty uses the packaged copy.
        geometry_schema_path: Region geometry schema; empty uses the packaged copy.
        output_path: Where the CLI writes the aggregated array; empty skips writing.
        log_level: Standard ``logging`` level name.
    """

    regions_root: str = DEFAULT_REGIONS_ROOT
    precision: int = DEFAULT_PRECISION
    geometry_extension: str = DEFAULT_GEOMETRY_EXTENSION
    geojson_schema_path: str = ""
    geometry_schema_path: str = ""
    output_path: str = ""
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> BuildConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range, or a numeric
                variable cannot be parsed (e.g. ``REGIONS_PRECISION=abc``).
        """
        raw_precision = os.getenv("REGIONS_PRECISION", str(DEFAULT_PRECISION))
        try:
            precision = int(raw_precision)
        except ValueError as exc:
            raise ConfigValidationError(
                "REGIONS_PRECISION", raw_precision, "must be an integer"
            ) from exc

        config = cls(
            regions_root=os.getenv("REGIONS_ROOT", DEFAULT_REGIONS_ROOT),
            precision=precision,
            geometry_extension=os.getenv("REGIONS_EXTENSION", DEFAULT_GEOMETRY_EXTENSION),
            geojson_schema_path=os.getenv("REGIONS_GEOJSON_SCHEMA", ""),
            geometry_schema_path=os.getenv("REGIONS_GEOMETRY_SCHEMA", ""),
            output_path=os.getenv("REGIONS_OUTPUT", ""),
            log_level=os.getenv("REGIONS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
        _validate(config)
        return config

    def with_overrides(self, **overrides: object) -> BuildConfig:
        """Return a copy with the non-``None`` overrides applied and re-validated."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "log_level" in changes:
            changes["log_level"] = str(changes["log_level"]).upper()
        config = dataclasses.replace(self, **changes)
        _validate(config)
        return config


def _validate(config: BuildConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.regions_root:
        raise ConfigValidationError("REGIONS_ROOT", config.regions_root, "must not be empty")

    if not 0 <= config.precision <= MAX_PRECISION:
        raise ConfigValidationError(
            "REGIONS_PRECISION",
            config.precision,
            f"must be between 0 and {MAX_PRECISION} (decimal digits)",
        )

    if not config.geometry_extension.startswith(".") or len(config.geometry_extension) < 2:
        raise ConfigValidationError(
            "REGIONS_EXTENSION",
            config.geometry_extension,
            "must be a file extension starting with '.'",
        )

    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ConfigValidationError(
            "REGIONS_LOG_LEVEL",
            config.log_level,
            "must be a standard logging level name",
        )
