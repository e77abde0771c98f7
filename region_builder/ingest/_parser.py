"""Relaxed parsing of region files.

Region files are authored by hand, so they are read as JSON5: comments,
trailing commas, unquoted keys and single-quoted strings are accepted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import json5

from region_builder.ingest._errors import ParseError

if TYPE_CHECKING:
    from pathlib import Path


def parse_region_text(text: str, path: Path | str) -> Any:
    """Parse JSON5 *text* read from *path*.

    Raises:
        ParseError: If *text* is not valid JSON5.
    """
    try:
        return json5.loads(text)
    except ValueError as exc:
        raise ParseError(str(exc), path=path) from exc


def parse_region_file(path: Path) -> Any:
    """Read and parse a region file.

    Raises:
        ParseError: If the file cannot be read, is not UTF-8, or is not
            valid JSON5.
    """
    try:
        with path.open(encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read region file: {exc}"
        raise ParseError(msg, path=path) from exc
    return parse_region_text(text, path)
