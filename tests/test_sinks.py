from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from html2dream.errors import SinkError
from html2dream.sinks import ClipboardSink, FileSink, StdoutSink


def test_stdout_sink(capsys) -> None:
    StdoutSink().write("div [] []")
    assert capsys.readouterr().out == "div [] []\n"


def test_file_sink_creates_parents(tmp_path: Path) -> None:
    path = tmp_path / "out" / "page.ml"
    sink = FileSink(path)
    sink.write("br [] ")
    assert path.read_text(encoding="utf-8") == "br [] "
    assert sink.label == str(path)


def test_clipboard_without_command_fails(monkeypatch) -> None:
    monkeypatch.setattr("html2dream.sinks.shutil.which", lambda name: None)
    with pytest.raises(SinkError, match="no clipboard command"):
        ClipboardSink().write("x")


def test_clipboard_pipes_text_to_first_available_command(monkeypatch) -> None:
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs["input"]))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr("html2dream.sinks.shutil.which", lambda name: name if name == "xclip" else None)
    monkeypatch.setattr("html2dream.sinks.subprocess.run", fake_run)
    ClipboardSink().write("div [] []")
    assert calls == [(["xclip", "-selection", "clipboard"], "div [] []")]


def test_clipboard_command_failure_is_reported(monkeypatch) -> None:
    def failing_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr("html2dream.sinks.shutil.which", lambda name: name)
    monkeypatch.setattr("html2dream.sinks.subprocess.run", failing_run)
    with pytest.raises(SinkError, match="pbcopy failed"):
        ClipboardSink().write("x")
