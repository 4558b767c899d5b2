"""Convert parsed HTML trees into dream-html DSL source."""

from .errors import PrecheckError, PrecheckReason, UnrecognizedNodeWarning
from .tables import ClassificationTables, load_tables
from .transpiler import Transpiler, TranspileResult, serialize

__all__ = [
    "ClassificationTables",
    "PrecheckError",
    "PrecheckReason",
    "Transpiler",
    "TranspileResult",
    "UnrecognizedNodeWarning",
    "load_tables",
    "serialize",
]
