"""Aggregation of validated regions into the build result."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from region_builder.ingest._errors import DuplicateIdentifierError
from region_builder.models.region import RegionCollection

if TYPE_CHECKING:
    from region_builder.models.region import RegionGeometry

logger = logging.getLogger("region_builder.ingest.aggregation")


def identifier_for(path: Path | str) -> str:
    """Return the region identifier: the lowercased base filename."""
    return Path(path).name.lower()


class RegionAggregator:
    """Accumulates regions in arrival order, rejecting duplicate identifiers.

    Identifiers ignore the directory, so ``A/us.geojson`` and
    ``B/US.geojson`` collide.
    """

    def __init__(self) -> None:
        self._seen: dict[str, Path] = {}
        self._regions: list[RegionGeometry] = []
        self._sources: list[Path] = []

    @property
    def count(self) -> int:
        """Number of unique regions accepted so far."""
        return len(self._seen)

    def add(self, path: Path | str, geometry: RegionGeometry) -> None:
        """Record *geometry* built from *path*.

        Raises:
            DuplicateIdentifierError: If another file already claimed the
                same identifier. Both paths are reported.
        """
        path = Path(path)
        identifier = identifier_for(path)
        first = self._seen.get(identifier)
        if first is not None:
            raise DuplicateIdentifierError(identifier, first, path)

        self._seen[identifier] = path
        self._regions.append(geometry)
        self._sources.append(path)
        logger.debug("Accepted region %s (%s) from %s", identifier, geometry.type, path)

    def collection(self) -> RegionCollection:
        """Return the accumulated regions as an immutable collection."""
        return RegionCollection(regions=tuple(self._regions), sources=tuple(self._sources))
