"""Shape-contract checks for normalized region documents.

A region file must hold exactly one ``Polygon`` or ``MultiPolygon``
geometry. Wrapped geometries (GeometryCollection, legacy ``regions``
containers) are rejected rather than unwrapped so the author fixes the
source file. On success only ``type`` and ``coordinates`` survive.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from region_builder.ingest._constants import ACCEPTED_GEOMETRY_TYPES, GEOMETRY_COLLECTION
from region_builder.ingest._errors import (
    CollectionTypeError,
    MissingCoordinatesError,
    UnsupportedTypeError,
)
from region_builder.ingest._normalization import extract_regions
from region_builder.models.region import RegionGeometry

if TYPE_CHECKING:
    from pathlib import Path


def validate_shape(document: Any, path: Path | str) -> RegionGeometry:
    """Check the geometry shape contract and strip extraneous fields.

    Raises:
        CollectionTypeError: For a GeometryCollection, even one wrapping a
            single geometry, or a legacy ``regions`` container.
        UnsupportedTypeError: If the type is not Polygon or MultiPolygon.
        MissingCoordinatesError: If ``coordinates`` is absent or null.
    """
    kind = document.get("type") if isinstance(document, dict) else None

    if kind == GEOMETRY_COLLECTION:
        msg = (
            "Invalid GeoJSON - GeometryCollection with a single geometry should be "
            "avoided in favor of single part or a single object of multi-part type"
        )
        raise CollectionTypeError(msg, path=path)

    if kind not in ACCEPTED_GEOMETRY_TYPES and extract_regions(document) is not None:
        msg = (
            "Invalid GeoJSON - nested 'regions' collections are not supported, "
            "use a single Polygon or MultiPolygon"
        )
        raise CollectionTypeError(msg, path=path)

    if kind not in ACCEPTED_GEOMETRY_TYPES:
        found = repr(kind) if isinstance(document, dict) else type(document).__name__
        msg = f'Type must be "Polygon" or "MultiPolygon", got {found}'
        raise UnsupportedTypeError(msg, path=path)

    coordinates = document.get("coordinates")
    if coordinates is None:
        msg = "Geometry missing coordinates"
        raise MissingCoordinatesError(msg, path=path)

    return RegionGeometry(type=kind, coordinates=copy.deepcopy(coordinates))
