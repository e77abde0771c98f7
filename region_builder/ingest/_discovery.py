"""Region file discovery.

Walks the input tree and yields the files that should be ingested.
Documentation and license files are skipped silently; any other file
without the region extension aborts the build.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from region_builder.core.constants import DEFAULT_GEOMETRY_EXTENSION
from region_builder.ingest._constants import DOCUMENTATION_PATTERN, LICENSE_PATTERN
from region_builder.ingest._errors import DiscoveryError, DiscoveryExtensionError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("region_builder.ingest.discovery")


def is_ignored(path: Path) -> bool:
    """Whether *path* is a documentation or license file."""
    return bool(DOCUMENTATION_PATTERN.search(path.name) or LICENSE_PATTERN.search(path.name))


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def iter_region_files(
    root: Path | str, *, extension: str = DEFAULT_GEOMETRY_EXTENSION
) -> Iterator[Path]:
    """Yield region files found recursively beneath *root*.

    Paths are yielded in sorted order so repeated runs over an unchanged
    tree see the same sequence. Hidden files and directories are not
    candidates.

    Raises:
        DiscoveryError: If *root* is not an existing directory.
        DiscoveryExtensionError: When a non-ignored file lacks *extension*.
            Raised lazily, once iteration reaches that file.
    """
    root = Path(root)
    if not root.is_dir():
        msg = f"Regions directory not found: {root}"
        raise DiscoveryError(msg, path=root)

    for path in sorted(root.rglob("*")):
        if not path.is_file() or _is_hidden(path.relative_to(root)):
            continue
        if is_ignored(path):
            logger.debug("Skipping non-geometry file: %s", path)
            continue
        if not path.name.endswith(extension):
            msg = f"File should have a {extension} extension"
            raise DiscoveryExtensionError(msg, path=path)
        yield path
