"""Pydantic models and loaders for attribute classification tables."""

from __future__ import annotations

import re
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import TablesError

PRESETS_DIR = Path(__file__).parent / "presets"
DEFAULT_PRESET = "extended"

MODULE_IDENT_RE = re.compile(r"^[A-Z][A-Za-z0-9_]*$")


def _check_lowercase(values: FrozenSet[str]) -> FrozenSet[str]:
    bad = sorted(value for value in values if value != value.lower() or not value)
    if bad:
        raise ValueError(f"names must be non-empty and lower-case: {', '.join(bad)}")
    return values


class NamespaceSpec(BaseModel):
    """An attribute family spelled ``Namespace.name`` in the DSL."""

    namespace: str = Field(..., description="OCaml module that holds the attributes (e.g. Aria).")
    names: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Bare attribute names recognized after the prefix.",
    )
    data_alias: bool = Field(
        False,
        description="Also recognize the data-<prefix><name> spelling of each attribute.",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("namespace")
    @classmethod
    def _namespace_is_module(cls, value: str) -> str:
        if not MODULE_IDENT_RE.match(value):
            raise ValueError(f"namespace must be a capitalized identifier, got {value!r}")
        return value

    @field_validator("names")
    @classmethod
    def _names_lowercase(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return _check_lowercase(value)


class ClassificationTables(BaseModel):
    """Read-only lookup tables driving attribute and element classification."""

    suffix_names: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Attribute names that collide with reserved words and get a trailing underscore.",
    )
    namespaces: Mapping[str, NamespaceSpec] = Field(
        default_factory=lambda: MappingProxyType({}),
        description="Attribute prefix (e.g. 'aria-') to namespace mapping.",
    )
    variant_names: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Attributes whose value is emitted as a polymorphic variant.",
    )
    numeric_names: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Attributes whose value is emitted as a bare number.",
    )
    boolean_names: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Presence-only attributes; the value slot stays empty.",
    )
    void_tags: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Elements emitted without a child list.",
    )
    raw_text_tags: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Elements whose descendant text collapses into one string literal.",
    )
    hyphen_fallback: bool = Field(
        False,
        description="Emit unmatched hyphenated names as string_attr \"name\".",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator(
        "suffix_names",
        "variant_names",
        "numeric_names",
        "boolean_names",
        "void_tags",
        "raw_text_tags",
    )
    @classmethod
    def _lowercase_names(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return _check_lowercase(value)

    @field_validator("suffix_names")
    @classmethod
    def _suffix_names_are_identifiers(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        hyphenated = sorted(name for name in value if "-" in name)
        if hyphenated:
            raise ValueError(f"suffixed names cannot contain '-': {', '.join(hyphenated)}")
        return value

    @field_validator("namespaces")
    @classmethod
    def _prefixes_end_with_hyphen(cls, value: Mapping[str, NamespaceSpec]) -> Mapping[str, NamespaceSpec]:
        for prefix in value:
            if not prefix.endswith("-") or prefix != prefix.lower():
                raise ValueError(f"namespace prefix must be lower-case and end with '-': {prefix!r}")
        # Read-only view; presets are shared process-wide through preset().
        return MappingProxyType(dict(value))


def available_presets() -> list[str]:
    return sorted(path.stem for path in PRESETS_DIR.glob("*.yaml"))


def _resolve_source(source: Union[str, Path, None]) -> Path:
    if source is None:
        source = DEFAULT_PRESET
    path = Path(source)
    if isinstance(source, str) and path.suffix == "" and not path.exists():
        preset = PRESETS_DIR / f"{source}.yaml"
        if not preset.exists():
            known = ", ".join(available_presets())
            raise TablesError(f"Unknown table preset '{source}' (known: {known})")
        return preset
    if not path.exists():
        raise TablesError(f"Tables file not found: {path}")
    return path


def load_tables(source: Union[str, Path, None] = None) -> ClassificationTables:
    """Load tables from a preset name or a YAML path; ``None`` means the default preset."""
    path = _resolve_source(source)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise TablesError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TablesError(f"{path} must contain a mapping of table names.")
    try:
        return ClassificationTables.model_validate(data)
    except ValidationError as exc:
        raise TablesError(f"Invalid classification tables in {path}: {exc}") from exc


def dump_tables(tables: ClassificationTables) -> str:
    """Render tables as YAML with sorted lists so output is stable."""
    payload: Dict[str, object] = {}
    for name in ClassificationTables.model_fields:
        value = getattr(tables, name)
        if name == "namespaces":
            payload[name] = {
                prefix: {
                    "namespace": spec.namespace,
                    "names": sorted(spec.names),
                    "data_alias": spec.data_alias,
                }
                for prefix, spec in sorted(value.items())
            }
        elif isinstance(value, (set, frozenset)):
            payload[name] = sorted(value)
        else:
            payload[name] = value
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)


_CACHE: Dict[str, ClassificationTables] = {}


def preset(name: Optional[str] = None) -> ClassificationTables:
    """Return a built-in preset, loading it once per process."""
    key = name or DEFAULT_PRESET
    if key not in _CACHE:
        _CACHE[key] = load_tables(key)
    return _CACHE[key]


__all__ = [
    "ClassificationTables",
    "NamespaceSpec",
    "available_presets",
    "dump_tables",
    "load_tables",
    "preset",
]
