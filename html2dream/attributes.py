"""Attribute name and value policies driven by classification tables."""

from __future__ import annotations

from typing import Optional

from .literals import RESERVED_SUFFIX, encode_string, encode_variant
from .tables import ClassificationTables

DATA_PREFIX = "data-"


def _namespaced(name: str, tables: ClassificationTables, *, via_alias: bool) -> Optional[str]:
    for prefix, spec in tables.namespaces.items():
        if via_alias and not spec.data_alias:
            continue
        if not name.startswith(prefix):
            continue
        bare = name[len(prefix):]
        if bare in spec.names:
            return f"{spec.namespace}.{bare.replace('-', '_')}"
    return None


def attribute_name(raw: str, tables: ClassificationTables) -> str:
    """Spell an HTML attribute name as a DSL attribute."""
    if raw in tables.suffix_names:
        return raw + RESERVED_SUFFIX

    namespaced = _namespaced(raw, tables, via_alias=False)
    if namespaced is not None:
        return namespaced

    if raw.startswith(DATA_PREFIX):
        namespaced = _namespaced(raw[len(DATA_PREFIX):], tables, via_alias=True)
        if namespaced is not None:
            return namespaced

    if tables.hyphen_fallback and "-" in raw:
        return f"string_attr {encode_string(raw)}"
    return raw


def attribute_value(raw: Optional[str], name: str, tables: ClassificationTables) -> str:
    """Encode an attribute value; boolean and missing values leave the slot empty."""
    if raw is None:
        return ""
    if name in tables.boolean_names:
        return ""
    if name in tables.numeric_names:
        return raw
    if name in tables.variant_names:
        return encode_variant(raw)
    return encode_string(raw)


__all__ = ["attribute_name", "attribute_value"]
