"""Data models.

- RegionGeometry: normalized ``{type, coordinates}`` region boundary
- RegionCollection: ordered result of a build
"""

from region_builder.models.region import RegionCollection, RegionGeometry

__all__ = [
    "RegionCollection",
    "RegionGeometry",
]
