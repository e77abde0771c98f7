"""Tests for region file discovery.

Covers:
- Recursive discovery in sorted order
- Documentation and license files skipped silently
- Hidden files and directories ignored
- Wrong-extension files abort discovery (case-sensitive extension)
- Missing root directory
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from region_builder.ingest import (
    DiscoveryError,
    DiscoveryExtensionError,
    is_ignored,
    iter_region_files,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestDiscoveryOrder:
    """Files are found recursively in a stable order."""

    def test_recursive_sorted(self, regions_root: Path, write_region) -> None:
        write_region("d.geojson", "{}")
        write_region("b/c.geojson", "{}")
        write_region("a.geojson", "{}")

        found = [p.relative_to(regions_root).as_posix() for p in iter_region_files(regions_root)]
        assert found == ["a.geojson", "b/c.geojson", "d.geojson"]

    def test_repeated_runs_identical(self, regions_root: Path, write_region) -> None:
        for name in ("z/one.geojson", "m.geojson", "a/b/two.geojson"):
            write_region(name, "{}")
        assert list(iter_region_files(regions_root)) == list(iter_region_files(regions_root))

    def test_empty_root(self, regions_root: Path) -> None:
        assert list(iter_region_files(regions_root)) == []

    def test_directories_not_yielded(self, regions_root: Path, write_region) -> None:
        (regions_root / "empty.geojson").mkdir()
        write_region("real.geojson", "{}")
        assert [p.name for p in iter_region_files(regions_root)] == ["real.geojson"]


class TestSkippedFiles:
    """Documentation, license and hidden files never reach the parser."""

    @pytest.mark.parametrize(
        "name",
        ["README.md", "notes.md", "CHANGES.MD", "LICENSE", "license", "DATA-LICENSE"],
    )
    def test_ignored_names(self, regions_root: Path, write_region, name: str) -> None:
        write_region(name, "not geojson")
        write_region("us.geojson", "{}")
        assert [p.name for p in iter_region_files(regions_root)] == ["us.geojson"]

    def test_is_ignored(self, regions_root: Path) -> None:
        assert is_ignored(regions_root / "docs" / "Readme.Md")
        assert is_ignored(regions_root / "LICENSE")
        assert not is_ignored(regions_root / "license.geojson")

    def test_hidden_entries_skipped(self, regions_root: Path, write_region) -> None:
        write_region(".DS_Store", "binary")
        write_region(".git/config", "[core]")
        write_region("fr.geojson", "{}")
        assert [p.name for p in iter_region_files(regions_root)] == ["fr.geojson"]


class TestExtensionErrors:
    """Any other file aborts discovery."""

    def test_wrong_extension(self, regions_root: Path, write_region) -> None:
        bad = write_region("nested/notes.txt", "text")
        with pytest.raises(DiscoveryExtensionError) as exc_info:
            list(iter_region_files(regions_root))
        assert exc_info.value.path == bad
        assert ".geojson" in exc_info.value.message

    def test_extension_is_case_sensitive(self, regions_root: Path, write_region) -> None:
        write_region("US.GEOJSON", "{}")
        with pytest.raises(DiscoveryExtensionError):
            list(iter_region_files(regions_root))

    def test_json_extension_rejected(self, regions_root: Path, write_region) -> None:
        write_region("us.json", "{}")
        with pytest.raises(DiscoveryExtensionError):
            list(iter_region_files(regions_root))

    def test_error_raised_when_reached(self, regions_root: Path, write_region) -> None:
        write_region("a.geojson", "{}")
        write_region("b.txt", "text")
        files = iter_region_files(regions_root)
        assert next(files).name == "a.geojson"
        with pytest.raises(DiscoveryExtensionError):
            next(files)

    def test_custom_extension(self, regions_root: Path, write_region) -> None:
        write_region("us.json5", "{}")
        assert [p.name for p in iter_region_files(regions_root, extension=".json5")] == [
            "us.json5"
        ]


class TestMissingRoot:
    """A root that is not a directory is a discovery error."""

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(DiscoveryError) as exc_info:
            list(iter_region_files(tmp_path / "nope"))
        assert not isinstance(exc_info.value, DiscoveryExtensionError)

    def test_root_is_file(self, tmp_path: Path) -> None:
        file_root = tmp_path / "regions.geojson"
        file_root.write_text("{}", encoding="utf-8")
        with pytest.raises(DiscoveryError):
            list(iter_region_files(file_root))
