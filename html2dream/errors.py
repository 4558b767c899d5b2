"""Error and diagnostic types shared by the transpiler and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrecheckReason(str, Enum):
    MISSING_ROOT = "missing-root"
    UNSUPPORTED_ROOT = "unsupported-root"
    EMPTY_DOCUMENT = "empty-document"


class PrecheckError(ValueError):
    """Raised before any output is produced when a required anchor is absent."""

    def __init__(self, reason: PrecheckReason, detail: str) -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(f"precheck failed ({reason.value}): {detail}")


class TablesError(ValueError):
    """Raised when classification tables cannot be located or validated."""


class SinkError(RuntimeError):
    """Raised when finished output cannot be delivered to its destination."""


@dataclass(frozen=True)
class UnrecognizedNodeWarning:
    """A node kind outside element/text/comment that was skipped."""

    kind: str
    path: str

    @property
    def message(self) -> str:
        return f"skipped unrecognized node '{self.kind}' at {self.path}"


__all__ = [
    "PrecheckError",
    "PrecheckReason",
    "SinkError",
    "TablesError",
    "UnrecognizedNodeWarning",
]
