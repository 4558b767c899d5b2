"""Bridge BeautifulSoup trees into the markup model."""

from __future__ import annotations

from typing import List, Optional

from bs4 import (
    BeautifulSoup,
    CData,
    Comment as SoupComment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from .dom_model import Attribute, Comment, Element, MarkupNode, Text, Unrecognized
from .errors import PrecheckError, PrecheckReason

DEFAULT_SELECTOR = "html"

_UNRECOGNIZED_KINDS = {
    CData: "cdata",
    Doctype: "doctype",
    Declaration: "declaration",
    ProcessingInstruction: "processing-instruction",
}


def parse_html(text: str) -> BeautifulSoup:
    if not text.strip():
        raise PrecheckError(PrecheckReason.EMPTY_DOCUMENT, "input document is empty")
    # Keep class/rel/etc. as the literal attribute string instead of a token list.
    return BeautifulSoup(text, "html.parser", multi_valued_attributes=None)


def select_root(soup: BeautifulSoup, selector: Optional[str] = None) -> Tag:
    """Return the element to convert.

    An explicit ``selector`` must match. Without one, the ``<html>`` element is
    used, and a fragment with a single top-level element falls back to that
    element (``html.parser`` never synthesizes ``<html>``).
    """
    if selector is not None:
        root = soup.select_one(selector)
        if root is None:
            raise PrecheckError(
                PrecheckReason.MISSING_ROOT,
                f"no element matches selector '{selector}'",
            )
        return root

    root = soup.select_one(DEFAULT_SELECTOR)
    if root is not None:
        return root
    top_level = [child for child in soup.children if isinstance(child, Tag)]
    if len(top_level) == 1:
        return top_level[0]
    raise PrecheckError(
        PrecheckReason.MISSING_ROOT,
        f"no '{DEFAULT_SELECTOR}' element and {len(top_level)} top-level elements; "
        "pass a selector to pick the root",
    )


def _attributes(tag: Tag) -> List[Attribute]:
    attrs: List[Attribute] = []
    for name, value in tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        attrs.append((name, value))
    return attrs


def from_soup(node: object) -> MarkupNode:
    """Convert a bs4 node (and its descendants) into markup model nodes."""
    if isinstance(node, Tag):
        return Element(
            tag_name=node.name,
            attributes=_attributes(node),
            children=[from_soup(child) for child in node.children],
        )
    if isinstance(node, SoupComment):
        return Comment(data=str(node))
    for soup_type, kind in _UNRECOGNIZED_KINDS.items():
        if isinstance(node, soup_type):
            return Unrecognized(kind=kind, data=str(node))
    if isinstance(node, NavigableString):
        return Text(data=str(node))
    return Unrecognized(kind=type(node).__name__)


def document_root(text: str, selector: Optional[str] = None) -> MarkupNode:
    """Parse ``text`` and return the model node chosen by :func:`select_root`."""
    soup = parse_html(text)
    return from_soup(select_root(soup, selector))


__all__ = ["DEFAULT_SELECTOR", "document_root", "from_soup", "parse_html", "select_root"]
