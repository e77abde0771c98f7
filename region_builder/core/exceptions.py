"""Unified build exception taxonomy.

Provides a shared base exception hierarchy for every stage of the region
build. Every domain exception inherits from ``PipelineError`` and carries
structured context fields (stage, code, offending path) so that the
command-line layer can print actionable diagnostics without knowing about
individual stages.

Taxonomy categories
-------------------
- ``ValidationError`` — an input file or setting violates the contract.
- ``PermanentError``  — the build cannot proceed for reasons outside the
  input tree (e.g. an unreadable schema document).

None of these are recovered from: the first error aborts the whole build.

Every exception exposes ``to_error_dict()`` for a stable structured error
payload and ``details()`` for the extra lines shown under the message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class PipelineError(Exception):
    """Base exception for all region-build errors.

    Attributes:
        message: Human-readable error description.
        stage: Build stage where the error occurred
            (e.g. ``"parse"``, ``"schema"``).
        code: Machine-readable error code (e.g. ``"REGION_PARSE_FAILED"``).
        path: Input file (or directory) the error refers to, if any.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        path: Path | str | None = None,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.path = path
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def details(self) -> list[str]:
        """Return supporting lines for operator diagnostics.

        The default is the offending path alone; subclasses add their own
        context (conflicting paths, schema violations).
        """
        return [str(self.path)] if self.path is not None else []

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "path": str(self.path) if self.path is not None else "",
            "details": self.details(),
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PipelineError):
    """An input file or setting violates the build contract."""


class PermanentError(PipelineError):
    """Unrecoverable failure unrelated to the input tree."""
