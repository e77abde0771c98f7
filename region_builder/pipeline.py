"""Region build pipeline.

Coordinates the ingest stages for every discovered file:

1. Discover — walk the regions directory
2. Parse — JSON5 into a raw document
3. Normalize — rewind rings, round coordinates
4. Shape check — Polygon/MultiPolygon only, strip extra fields
5. Schema check — geometry schema via the injected ``SchemaValidator``
6. Aggregate — reject duplicate identifiers, keep discovery order

The first error raised by any stage propagates to the caller unchanged;
no partial collection is ever returned.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING

from region_builder.core.constants import (
    DEFAULT_GEOMETRY_EXTENSION,
    DEFAULT_PRECISION,
    GEOJSON_SCHEMA_FILE,
    GEOMETRY_SCHEMA_FILE,
)
from region_builder.ingest import (
    RegionAggregator,
    SchemaValidator,
    iter_region_files,
    load_packaged_schema,
    load_schema,
    normalize_geometry,
    parse_region_file,
    validate_shape,
)

if TYPE_CHECKING:
    from region_builder.core.config import BuildConfig
    from region_builder.models.region import RegionCollection, RegionGeometry

logger = logging.getLogger("region_builder.pipeline")


def process_region_file(
    path: Path,
    validator: SchemaValidator,
    *,
    precision: int = DEFAULT_PRECISION,
) -> RegionGeometry:
    """Run one file through parse → normalize → shape check → schema check.

    Raises:
        ParseError, ShapeError, SchemaValidationError: From the failing stage.
    """
    raw = parse_region_file(path)
    document = normalize_geometry(raw, precision=precision)
    geometry = validate_shape(document, path)
    validator.validate(geometry.to_dict(), path)
    return geometry


def build_regions(
    root: Path | str,
    validator: SchemaValidator,
    *,
    precision: int = DEFAULT_PRECISION,
    extension: str = DEFAULT_GEOMETRY_EXTENSION,
) -> RegionCollection:
    """Build the region collection from every region file under *root*.

    Args:
        root: Directory scanned recursively for region files.
        validator: Schema validator constructed once for this build.
        precision: Decimal digits kept on every coordinate.
        extension: Required region file extension.

    Returns:
        The validated regions, in discovery order.

    Raises:
        PipelineError: The first error raised by any stage.
    """
    root = Path(root)
    started = time.perf_counter()
    logger.info("Building regions from %s", root)

    aggregator = RegionAggregator()
    for path in iter_region_files(root, extension=extension):
        geometry = process_region_file(path, validator, precision=precision)
        aggregator.add(path, geometry)

    elapsed = time.perf_counter() - started
    logger.info("Region count: %d", aggregator.count)
    logger.info("Regions built in %.3fs", elapsed)
    return aggregator.collection()


def schema_validator_for(config: BuildConfig) -> SchemaValidator:
    """Build the validator for *config*, falling back to the packaged schemas."""
    geometry_schema = (
        load_schema(config.geometry_schema_path)
        if config.geometry_schema_path
        else load_packaged_schema(GEOMETRY_SCHEMA_FILE)
    )
    geojson_schema = (
        load_schema(config.geojson_schema_path)
        if config.geojson_schema_path
        else load_packaged_schema(GEOJSON_SCHEMA_FILE)
    )
    return SchemaValidator(geometry_schema, geojson_schema)


def build_regions_from_config(config: BuildConfig, validator: SchemaValidator) -> RegionCollection:
    """Run ``build_regions`` with the root, precision and extension from *config*."""
    return build_regions(
        config.regions_root,
        validator,
        precision=config.precision,
        extension=config.geometry_extension,
    )
