"""Utility helpers for text IO and stderr diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path

WARN_PREFIX = "[html2dream]"


def read_text(path: Path | None) -> str:
    """Read input from ``path`` or, when it is ``None``, from stdin."""
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(f"{WARN_PREFIX} {msg}", file=sys.stderr)
