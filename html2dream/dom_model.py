"""Simple DOM model consumed by the transpiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

Attribute = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class Text:
    data: str


@dataclass(frozen=True)
class Comment:
    data: str


@dataclass(frozen=True)
class Unrecognized:
    """Any node kind the transpiler has no DSL form for (doctype, CDATA, ...)."""

    kind: str
    data: str = ""


@dataclass(frozen=True)
class Element:
    tag_name: str
    attributes: List[Attribute] = field(default_factory=list)
    children: List["MarkupNode"] = field(default_factory=list)

    def text_content(self) -> str:
        """Descendant text flattened in document order; comments are ignored."""
        parts: List[str] = []
        _collect_text(self, parts)
        return "".join(parts)


MarkupNode = Union[Element, Text, Comment, Unrecognized]


def _collect_text(node: Element, parts: List[str]) -> None:
    for child in node.children:
        if isinstance(child, Text):
            parts.append(child.data)
        elif isinstance(child, Element):
            _collect_text(child, parts)


__all__ = ["Attribute", "Comment", "Element", "MarkupNode", "Text", "Unrecognized"]
