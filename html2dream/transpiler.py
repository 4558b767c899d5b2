"""Serialize markup trees into dream-html DSL source.

Elements become ``tag [attr value; ...] [children]``; void elements stop after
the attribute list and raw-text elements carry a single string literal in
place of the child list. Text and comments become ``txt "..."`` and
``comment "..."``. Any other node kind is recorded as a warning and skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .attributes import attribute_name, attribute_value
from .dom_model import Comment, Element, MarkupNode, Text, Unrecognized
from .errors import PrecheckError, PrecheckReason, UnrecognizedNodeWarning
from .literals import encode_string
from .tables import ClassificationTables, preset

WarningHandler = Callable[[UnrecognizedNodeWarning], None]


@dataclass
class TranspileResult:
    text: str
    warnings: List[UnrecognizedNodeWarning] = field(default_factory=list)


def precheck(root: Optional[MarkupNode]) -> MarkupNode:
    """Validate the traversal anchor before any output is produced."""
    if root is None:
        raise PrecheckError(PrecheckReason.MISSING_ROOT, "no root node was supplied")
    if not isinstance(root, (Element, Text, Comment)):
        kind = root.kind if isinstance(root, Unrecognized) else type(root).__name__
        raise PrecheckError(
            PrecheckReason.UNSUPPORTED_ROOT,
            f"root must be an element, text or comment node, got {kind}",
        )
    return root


class Transpiler:
    """Depth-first serializer parameterized by classification tables."""

    def __init__(
        self,
        tables: Optional[ClassificationTables] = None,
        *,
        skip_blank_text: bool = False,
        on_warning: Optional[WarningHandler] = None,
    ) -> None:
        self.tables = tables if tables is not None else preset()
        self.skip_blank_text = skip_blank_text
        self.on_warning = on_warning

    def serialize(self, root: Optional[MarkupNode]) -> str:
        return self.transpile(root).text

    def transpile(self, root: Optional[MarkupNode]) -> TranspileResult:
        node = precheck(root)
        parts: List[str] = []
        warnings: List[UnrecognizedNodeWarning] = []
        self._write(node, parts, warnings, _describe(node, 0))
        return TranspileResult(text="".join(parts), warnings=warnings)

    def _write(
        self,
        node: MarkupNode,
        parts: List[str],
        warnings: List[UnrecognizedNodeWarning],
        path: str,
    ) -> None:
        if isinstance(node, Comment):
            parts.append("comment ")
            parts.append(encode_string(node.data))
        elif isinstance(node, Text):
            parts.append("txt ")
            parts.append(encode_string(node.data))
        elif isinstance(node, Element):
            self._write_element(node, parts, warnings, path)
        else:
            self._report(node, warnings, path)

    def _write_element(
        self,
        node: Element,
        parts: List[str],
        warnings: List[UnrecognizedNodeWarning],
        path: str,
    ) -> None:
        tables = self.tables
        name = node.tag_name.lower()
        parts.append(name)

        parts.append(" [")
        for attr_name, attr_value in node.attributes:
            parts.append(attribute_name(attr_name, tables))
            parts.append(" ")
            parts.append(attribute_value(attr_value, attr_name, tables))
            parts.append("; ")
        parts.append("] ")

        if name in tables.void_tags:
            return
        if name in tables.raw_text_tags:
            parts.append(encode_string(node.text_content()))
            return

        parts.append("[")
        for index, child in enumerate(node.children):
            child_path = f"{path} > {_describe(child, index)}"
            if not isinstance(child, (Element, Text, Comment)):
                # No "\n" or ";" either: an empty entry would break the OCaml list.
                self._report(child, warnings, child_path)
                continue
            if self.skip_blank_text and isinstance(child, Text) and not child.data.strip():
                continue
            parts.append("\n")
            self._write(child, parts, warnings, child_path)
            parts.append(";")
        parts.append("]")

    def _report(self, node: object, warnings: List[UnrecognizedNodeWarning], path: str) -> None:
        kind = node.kind if isinstance(node, Unrecognized) else type(node).__name__
        warning = UnrecognizedNodeWarning(kind=kind, path=path)
        warnings.append(warning)
        if self.on_warning is not None:
            self.on_warning(warning)


def _describe(node: object, index: int) -> str:
    if isinstance(node, Element):
        return f"{node.tag_name.lower()}[{index}]"
    return f"#{index}"


def serialize(root: Optional[MarkupNode], tables: Optional[ClassificationTables] = None) -> str:
    """Serialize ``root`` with ``tables`` (the extended preset by default)."""
    return Transpiler(tables).serialize(root)


__all__ = ["TranspileResult", "Transpiler", "precheck", "serialize"]
