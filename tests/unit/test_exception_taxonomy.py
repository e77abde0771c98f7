"""Tests for the unified exception taxonomy.

Validates:
- PipelineError hierarchy and structured attributes
- Category classification (validation, permanent)
- ``to_error_dict()`` produces stable payload keys
- Every stage exception is a PipelineError with its own stage and code
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from region_builder.core.config import ConfigValidationError
from region_builder.core.exceptions import PermanentError, PipelineError, ValidationError
from region_builder.ingest import (
    CollectionTypeError,
    DiscoveryError,
    DiscoveryExtensionError,
    DuplicateIdentifierError,
    MissingCoordinatesError,
    ParseError,
    SchemaLoadError,
    SchemaValidationError,
    UnsupportedTypeError,
)


class TestPipelineErrorBase:
    """PipelineError base class behavior."""

    def test_default_attributes(self) -> None:
        err = PipelineError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.path is None

    def test_custom_attributes(self) -> None:
        err = PipelineError("fail", stage="parse", code="X_FAILED", path="a.geojson")
        assert err.stage == "parse"
        assert err.code == "X_FAILED"
        assert err.path == "a.geojson"

    def test_str_is_message(self) -> None:
        assert str(PipelineError("human-readable error")) == "human-readable error"

    def test_details_default_to_path(self) -> None:
        assert PipelineError("x", path=Path("a/b.geojson")).details() == ["a/b.geojson"]
        assert PipelineError("x").details() == []

    def test_to_error_dict_keys(self) -> None:
        err = PipelineError("x", stage="s", code="C", path="p.geojson")
        d = err.to_error_dict()
        assert set(d.keys()) == {"category", "code", "stage", "message", "path", "details"}
        assert d["message"] == "x"
        assert d["path"] == "p.geojson"
        assert d["details"] == ["p.geojson"]

    def test_to_error_dict_without_path(self) -> None:
        assert PipelineError("x").to_error_dict()["path"] == ""


class TestCategories:
    """Category base classes."""

    def test_validation(self) -> None:
        assert ValidationError("bad input").category == "validation"

    def test_permanent(self) -> None:
        assert PermanentError("gone").category == "permanent"

    def test_base_is_permanent(self) -> None:
        assert PipelineError("x").category == "permanent"


class TestStageExceptions:
    """Every stage exception carries its stage and code."""

    EXPECTED: ClassVar[dict[type[PipelineError], tuple[str, str]]] = {
        DiscoveryError: ("discovery", "REGION_DISCOVERY_FAILED"),
        DiscoveryExtensionError: ("discovery", "REGION_EXTENSION_INVALID"),
        ParseError: ("parse", "REGION_PARSE_FAILED"),
        CollectionTypeError: ("shape", "REGION_COLLECTION_TYPE"),
        UnsupportedTypeError: ("shape", "REGION_TYPE_UNSUPPORTED"),
        MissingCoordinatesError: ("shape", "REGION_COORDINATES_MISSING"),
        SchemaLoadError: ("schema", "SCHEMA_LOAD_FAILED"),
    }

    def test_stage_and_code(self) -> None:
        for exc_type, (stage, code) in self.EXPECTED.items():
            err = exc_type("msg", path="x.geojson")
            assert err.stage == stage, exc_type
            assert err.code == code, exc_type
            assert isinstance(err, PipelineError)

    def test_input_errors_are_validation(self) -> None:
        for exc_type in self.EXPECTED:
            if exc_type is SchemaLoadError:
                continue
            assert issubclass(exc_type, ValidationError), exc_type

    def test_schema_validation_error(self) -> None:
        err = SchemaValidationError("x.geojson", ["$.coordinates is bad", "root bad"])
        assert err.stage == "schema"
        assert err.code == "REGION_SCHEMA_INVALID"
        assert err.category == "validation"
        assert "2 error(s)" in err.message
        assert err.to_error_dict()["details"] == [
            "x.geojson:",
            "$.coordinates is bad",
            "root bad",
        ]

    def test_duplicate_identifier_error(self) -> None:
        err = DuplicateIdentifierError("us.geojson", Path("A/us.geojson"), Path("B/US.geojson"))
        assert err.stage == "aggregation"
        assert err.code == "REGION_DUPLICATE_ID"
        assert "us.geojson" in err.message
        assert err.details() == ["A/us.geojson", "B/US.geojson"]

    def test_config_error_is_pipeline_error(self) -> None:
        assert issubclass(ConfigValidationError, ValidationError)
