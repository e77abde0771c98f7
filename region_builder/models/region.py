"""Data model for normalized region geometry.

A ``RegionGeometry`` is the minimal ``{type, coordinates}`` value left
after a region file has been parsed, normalized and shape-checked. The
``RegionCollection`` is the ordered result of a whole build and the
value handed to downstream build steps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class RegionGeometry:
    """A single ``Polygon`` or ``MultiPolygon`` region boundary.

    Attributes:
        type: GeoJSON geometry type, ``"Polygon"`` or ``"MultiPolygon"``.
        coordinates: Nested coordinate arrays (rings of positions for a
            Polygon, lists of such ring lists for a MultiPolygon).
    """

    type: str
    coordinates: list[Any]

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain GeoJSON geometry dict."""
        return {"type": self.type, "coordinates": self.coordinates}


@dataclass(frozen=True, slots=True)
class RegionCollection:
    """Ordered, immutable result of a region build.

    ``regions[i]`` was built from ``sources[i]``; order is discovery order.
    """

    regions: tuple[RegionGeometry, ...] = ()
    sources: tuple[Path, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self) -> Iterator[RegionGeometry]:
        return iter(self.regions)

    def __getitem__(self, index: int) -> RegionGeometry:
        return self.regions[index]

    def to_list(self) -> list[dict[str, object]]:
        """Serialise every region, preserving order."""
        return [region.to_dict() for region in self.regions]
