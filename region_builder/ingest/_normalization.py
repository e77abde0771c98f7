"""Geometry normalization for parsed region documents.

Responsibilities:
- Ring winding correction (right-hand rule: exterior rings
  counterclockwise, holes clockwise)
- Coordinate precision rounding at every nesting depth
- Extraction of the legacy ``regions`` container list

Both transformations walk every GeoJSON container (FeatureCollection,
Feature, GeometryCollection) so the result is canonical no matter how the
author wrapped the geometry. Type enforcement is left to ``_validation``.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING, Any

from shapely.geometry import LinearRing

from region_builder.core.constants import DEFAULT_PRECISION, MAX_PRECISION
from region_builder.ingest._constants import (
    GEOMETRY_COLLECTION,
    MIN_RING_POSITIONS,
    MULTI_POLYGON,
    POLYGON,
    REGIONS_KEY,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    GeometryTransform = Callable[[dict[str, Any]], dict[str, Any]]

# ---------------------------------------------------------------------------
# Container traversal
# ---------------------------------------------------------------------------


def _map_geojson(document: Any, transform_geometry: GeometryTransform) -> Any:
    """Apply *transform_geometry* to every geometry reachable from *document*.

    Returns a new tree; *document* is not mutated. Values that are not
    GeoJSON objects are returned unchanged.
    """
    if not isinstance(document, dict):
        return document

    kind = document.get("type")
    if kind == "FeatureCollection" and isinstance(document.get("features"), list):
        return {
            **document,
            "features": [_map_geojson(f, transform_geometry) for f in document["features"]],
        }
    if kind == "Feature":
        return {**document, "geometry": _map_geojson(document.get("geometry"), transform_geometry)}
    if kind == GEOMETRY_COLLECTION and isinstance(document.get("geometries"), list):
        return {
            **document,
            "geometries": [_map_geojson(g, transform_geometry) for g in document["geometries"]],
        }
    return transform_geometry(document)


# ---------------------------------------------------------------------------
# Winding order
# ---------------------------------------------------------------------------


def _is_position(value: object) -> bool:
    return (
        isinstance(value, list)
        and len(value) >= 2
        and all(
            isinstance(v, int | float) and not isinstance(v, bool) and math.isfinite(v)
            for v in value[:2]
        )
    )


def orient_ring(ring: Any, *, ccw: bool) -> Any:
    """Return *ring* with vertices ordered counterclockwise (or clockwise).

    Rings that are too short or contain malformed positions are returned
    unchanged; the schema check reports them.
    """
    if not isinstance(ring, list) or len(ring) < MIN_RING_POSITIONS:
        return ring
    if not all(_is_position(p) for p in ring):
        return ring
    if LinearRing([(p[0], p[1]) for p in ring]).is_ccw == ccw:
        return list(ring)
    return ring[::-1]


def _rewind_rings(rings: Any) -> Any:
    if not isinstance(rings, list):
        return rings
    return [orient_ring(ring, ccw=(idx == 0)) for idx, ring in enumerate(rings)]


def _rewind_geometry(geometry: dict[str, Any]) -> dict[str, Any]:
    kind = geometry.get("type")
    coords = geometry.get("coordinates")
    if kind == POLYGON:
        return {**geometry, "coordinates": _rewind_rings(coords)}
    if kind == MULTI_POLYGON and isinstance(coords, list):
        return {**geometry, "coordinates": [_rewind_rings(polygon) for polygon in coords]}
    return dict(geometry)


def rewind(document: Any) -> Any:
    """Rewind every polygon ring in *document* to the right-hand rule."""
    return _map_geojson(document, _rewind_geometry)


# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------


# Holds every finite double quantized to MAX_PRECISION digits.
_DECIMAL_CONTEXT = Context(prec=310 + MAX_PRECISION)


def _round_nested(value: Any, precision: int) -> Any:
    if isinstance(value, list):
        return [_round_nested(v, precision) for v in value]
    if isinstance(value, float) and math.isfinite(value):
        quantum = Decimal(1).scaleb(-precision)
        rounded = Decimal(value).quantize(
            quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
        )
        return float(rounded)
    return value


def round_coordinates(document: Any, precision: int = DEFAULT_PRECISION) -> Any:
    """Round every coordinate in *document* to *precision* decimal digits.

    Exact ties round away from zero. Integers are kept as integers;
    non-numeric and non-finite values are left for the schema check to report.
    """

    def _round_geometry(geometry: dict[str, Any]) -> dict[str, Any]:
        if "coordinates" not in geometry:
            return dict(geometry)
        return {**geometry, "coordinates": _round_nested(geometry["coordinates"], precision)}

    return _map_geojson(document, _round_geometry)


# ---------------------------------------------------------------------------
# Pipeline entry points
# ---------------------------------------------------------------------------


def normalize_geometry(raw: Any, *, precision: int = DEFAULT_PRECISION) -> Any:
    """Rewind then round a parsed region document."""
    return round_coordinates(rewind(raw), precision)


def extract_regions(document: Any) -> list[Any] | None:
    """Return the legacy top-level ``regions`` list, if the document has one."""
    if not isinstance(document, dict):
        return None
    regions = document.get(REGIONS_KEY)
    return regions if isinstance(regions, list) else None
