from __future__ import annotations

import pytest

from html2dream.tables import ClassificationTables, NamespaceSpec, preset


@pytest.fixture
def extended() -> ClassificationTables:
    return preset("extended")


@pytest.fixture
def minimal() -> ClassificationTables:
    return preset("minimal")


@pytest.fixture
def small_tables() -> ClassificationTables:
    return ClassificationTables(
        suffix_names={"type"},
        namespaces={"aria-": NamespaceSpec(namespace="Aria", names={"checked"}, data_alias=True)},
        boolean_names={"checked"},
        void_tags={"input"},
        raw_text_tags={"option"},
    )
