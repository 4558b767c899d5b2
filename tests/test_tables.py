from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from html2dream.attributes import attribute_name
from html2dream.errors import TablesError
from html2dream.tables import (
    ClassificationTables,
    NamespaceSpec,
    available_presets,
    dump_tables,
    load_tables,
    preset,
)


def test_presets_are_listed() -> None:
    assert available_presets() == ["extended", "minimal"]


def test_default_preset_is_extended() -> None:
    tables = load_tables()
    assert tables.hyphen_fallback is True
    assert set(tables.namespaces) == {"aria-", "hx-"}
    assert tables.namespaces["hx-"].data_alias is True
    assert tables.namespaces["aria-"].data_alias is False
    # Unquoted "on" would load as a YAML boolean.
    assert "on" in tables.namespaces["hx-"].names


def test_minimal_preset_has_no_namespaces() -> None:
    tables = load_tables("minimal")
    assert tables.namespaces == {}
    assert tables.hyphen_fallback is False
    assert "input" in tables.void_tags
    assert "option" in tables.raw_text_tags


def test_custom_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "tables.yaml"
    path.write_text(
        "suffix_names: [type]\n"
        "namespaces:\n"
        "  x-:\n"
        "    namespace: X\n"
        "    names: [foo-bar]\n"
        "void_tags: [br]\n",
        encoding="utf-8",
    )
    tables = load_tables(path)
    assert tables.suffix_names == frozenset({"type"})
    assert tables.namespaces["x-"].names == frozenset({"foo-bar"})
    assert tables.raw_text_tags == frozenset()


@pytest.mark.parametrize(
    "body",
    [
        "namespaces:\n  aria-:\n    namespace: aria\n",
        "namespaces:\n  aria:\n    namespace: Aria\n",
        "void_tags: [BR]\n",
        "suffix_names: [data-x]\n",
        "- just\n- a list\n",
        "void_tags: [br\n",
    ],
)
def test_invalid_tables_raise(tmp_path: Path, body: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(TablesError):
        load_tables(path)


def test_unknown_preset_and_missing_file(tmp_path: Path) -> None:
    with pytest.raises(TablesError, match="Unknown table preset"):
        load_tables("nope")
    with pytest.raises(TablesError, match="not found"):
        load_tables(tmp_path / "missing.yaml")


def test_tables_are_frozen() -> None:
    tables = load_tables("minimal")
    with pytest.raises(Exception):
        tables.hyphen_fallback = True


def test_dump_tables_is_sorted_and_reloadable() -> None:
    tables = load_tables("extended")
    text = dump_tables(tables)
    data = yaml.safe_load(text)
    assert data["void_tags"] == sorted(data["void_tags"])
    assert ClassificationTables.model_validate(data) == tables


def test_shared_preset_namespaces_cannot_be_mutated() -> None:
    tables = preset("extended")
    with pytest.raises(TypeError):
        tables.namespaces["x-"] = NamespaceSpec(namespace="X", names={"y"})
    with pytest.raises(TypeError):
        del tables.namespaces["aria-"]
    assert attribute_name("x-y", preset("extended")) == 'string_attr "x-y"'
    assert ClassificationTables().namespaces == {}
    with pytest.raises(TypeError):
        ClassificationTables().namespaces["x-"] = NamespaceSpec(namespace="X")
