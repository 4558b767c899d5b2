"""Literal encoders for DSL strings and polymorphic variants."""

from __future__ import annotations

VARIANT_SIGIL = "`"
RESERVED_SUFFIX = "_"

_UPPERCASED_VARIANTS = {"get", "post"}
_RESERVED_VARIANTS = {"true", "false"}


def _quoted_string_id(raw: str) -> str:
    # First id whose closing sequence "|id}" cannot be confused with the content.
    if "|}" not in raw:
        return ""
    # OCaml quoted-string ids are limited to a-z and "_".
    candidate = "q"
    while f"|{candidate}}}" in raw:
        candidate += "q"
    return candidate


def encode_string(raw: str) -> str:
    """Encode ``raw`` as a string literal.

    Values without a double quote are wrapped in plain double quotes with no
    escaping. Values containing one use an OCaml quoted string ``{|...|}``,
    switching to ``{q|...|q}`` (or ``qq``, ``qqq``, ...) when the content
    itself contains the closing sequence.
    """
    if '"' not in raw:
        return f'"{raw}"'
    ident = _quoted_string_id(raw)
    return f"{{{ident}|{raw}|{ident}}}"


def encode_variant(raw: str) -> str:
    if raw in _UPPERCASED_VARIANTS:
        value = raw.upper()
    elif raw in _RESERVED_VARIANTS:
        value = raw + RESERVED_SUFFIX
    else:
        value = raw.replace("-", "_")
    return VARIANT_SIGIL + value


__all__ = ["RESERVED_SUFFIX", "VARIANT_SIGIL", "encode_string", "encode_variant"]
