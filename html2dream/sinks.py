"""Destinations for finished DSL output."""

from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from .errors import SinkError
from .io_utils import write_text

CLIPBOARD_COMMANDS: Sequence[Sequence[str]] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


class Sink(Protocol):
    label: str

    def write(self, text: str) -> None: ...


class StdoutSink:
    label = "stdout"

    def write(self, text: str) -> None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()


@dataclass
class FileSink:
    path: Path

    @property
    def label(self) -> str:
        return str(self.path)

    def write(self, text: str) -> None:
        try:
            write_text(self.path, text)
        except OSError as exc:
            raise SinkError(f"could not write {self.path}: {exc}") from exc


class ClipboardSink:
    label = "clipboard"

    def __init__(self, commands: Sequence[Sequence[str]] = CLIPBOARD_COMMANDS) -> None:
        self.commands = commands

    def _find_command(self) -> Optional[List[str]]:
        for command in self.commands:
            if shutil.which(command[0]):
                return list(command)
        return None

    def write(self, text: str) -> None:
        command = self._find_command()
        if command is None:
            names = ", ".join(cmd[0] for cmd in self.commands)
            raise SinkError(f"no clipboard command found (tried {names})")
        try:
            subprocess.run(command, input=text, text=True, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise SinkError(f"clipboard command {command[0]} failed: {exc}") from exc


__all__ = ["CLIPBOARD_COMMANDS", "ClipboardSink", "FileSink", "Sink", "StdoutSink"]
