"""Shared pytest fixtures for the region build test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from region_builder.ingest import SchemaValidator

# ---------------------------------------------------------------------------
# Region tree fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def regions_root(tmp_path: Path) -> Path:
    """Return an empty regions directory."""
    root = tmp_path / "regions"
    root.mkdir()
    return root


@pytest.fixture()
def write_region(regions_root: Path):
    """Factory writing a region file under ``regions_root``.

    Accepts either raw text (written verbatim) or a document (JSON-encoded).
    """

    def _write(relative: str, content: str | dict[str, object]) -> Path:
        path = regions_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(scope="session")
def validator() -> SchemaValidator:
    """Schema validator built from the packaged schemas."""
    return SchemaValidator.default()
