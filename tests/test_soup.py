from __future__ import annotations

import pytest

from html2dream import PrecheckError, PrecheckReason, serialize
from html2dream.dom_model import Element, Text, Unrecognized
from html2dream.soup import document_root, from_soup, parse_html, select_root

PAGE = (
    "<!DOCTYPE html>"
    "<html lang=\"en\"><head><title>T</title></head>"
    "<body><p class=\"lead intro\">Hi <b>there</b></p><input disabled></body></html>"
)


def test_from_soup_builds_model_tree() -> None:
    root = document_root(PAGE)
    assert isinstance(root, Element)
    assert root.tag_name == "html"
    assert root.attributes == [("lang", "en")]
    head, body = root.children
    paragraph = body.children[0]
    assert paragraph.attributes == [("class", "lead intro")]
    assert paragraph.children[0] == Text("Hi ")
    assert paragraph.text_content() == "Hi there"


def test_doctype_maps_to_unrecognized() -> None:
    soup = parse_html(PAGE)
    assert from_soup(soup.contents[0]) == Unrecognized(kind="doctype", data="html")


def test_document_serializes_end_to_end(extended) -> None:
    out = serialize(document_root(PAGE), extended)
    assert out == (
        'html [lang "en"; ] [\n'
        'head [] [\ntitle [] "T";];\n'
        'body [] [\np [class_ "lead intro"; ] [\ntxt "Hi ";\nb [] [\ntxt "there";];];\n'
        'input [disabled ; ] ;];]'
    )


def test_selector_narrows_root(extended) -> None:
    root = document_root(PAGE, "body > p")
    assert serialize(root, extended).startswith('p [class_ "lead intro"; ] [')


def test_single_element_fragment_is_its_own_root(extended) -> None:
    root = document_root("<!-- note -->\n<p>fragment</p>\n")
    assert serialize(root, extended) == 'p [] [\ntxt "fragment";]'


def test_fragment_with_several_elements_needs_a_selector() -> None:
    soup = parse_html("<p>one</p><p>two</p>")
    with pytest.raises(PrecheckError) as excinfo:
        select_root(soup)
    assert excinfo.value.reason is PrecheckReason.MISSING_ROOT
    assert "2 top-level elements" in excinfo.value.detail


def test_explicit_selector_must_match() -> None:
    soup = parse_html(PAGE)
    with pytest.raises(PrecheckError) as excinfo:
        select_root(soup, "table")
    assert excinfo.value.reason is PrecheckReason.MISSING_ROOT
    assert "'table'" in excinfo.value.detail


def test_empty_document() -> None:
    with pytest.raises(PrecheckError) as excinfo:
        parse_html("   \n")
    assert excinfo.value.reason is PrecheckReason.EMPTY_DOCUMENT
