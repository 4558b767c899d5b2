"""Wrap transpiled output in an OCaml binding using Jinja templates."""

from __future__ import annotations

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_DIR = Path(__file__).parent / "templates"
SNIPPET_TEMPLATE = "snippet.ml.j2"

# OCaml value names start with a lower-case letter or an underscore.
BINDING_RE = re.compile(r"^[a-z_][A-Za-z0-9_']*$")


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )


def render_snippet(body: str, binding: str) -> str:
    """Render ``body`` as the right-hand side of ``let <binding> = ...``."""
    if not BINDING_RE.match(binding) or binding == "_":
        raise ValueError(f"'{binding}' is not a valid OCaml value name")
    template = _environment().get_template(SNIPPET_TEMPLATE)
    return template.render(binding=binding, body=body)


__all__ = ["render_snippet"]
