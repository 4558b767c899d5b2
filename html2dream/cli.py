"""Command-line interface for html2dream."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .errors import PrecheckError, SinkError, TablesError
from .io_utils import read_text, warn
from .render import render_snippet
from .sinks import ClipboardSink, FileSink, Sink, StdoutSink
from .soup import document_root
from .tables import ClassificationTables, available_presets, dump_tables, load_tables
from .transpiler import Transpiler


def _load_tables_or_exit(source: Optional[str]) -> ClassificationTables:
    try:
        return load_tables(source)
    except TablesError as exc:
        raise SystemExit(str(exc)) from exc


def _select_sink(args: argparse.Namespace) -> Sink:
    if args.clipboard:
        return ClipboardSink()
    if args.output:
        return FileSink(Path(args.output))
    return StdoutSink()


def _handle_convert(args: argparse.Namespace) -> None:
    tables = _load_tables_or_exit(args.tables)
    input_path = Path(args.input) if args.input else None
    if input_path is not None and not input_path.exists():
        raise SystemExit(f"Input HTML not found: {input_path}")

    transpiler = Transpiler(
        tables,
        skip_blank_text=args.skip_blank_text,
        on_warning=lambda warning: warn(warning.message),
    )
    try:
        root = document_root(read_text(input_path), args.selector)
        result = transpiler.transpile(root)
    except PrecheckError as exc:
        raise SystemExit(f"Cannot convert {input_path or 'stdin'}: {exc}") from exc

    output = result.text
    if args.wrap:
        try:
            output = render_snippet(output, args.wrap)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc

    sink = _select_sink(args)
    try:
        sink.write(output)
    except SinkError as exc:
        warn(f"serialized {len(output)} characters but delivery to {sink.label} failed: {exc}")
        sys.exit(1)
    if not isinstance(sink, StdoutSink):
        warn(f"wrote {len(output)} characters to {sink.label}")


def _handle_tables_show(args: argparse.Namespace) -> None:
    tables = _load_tables_or_exit(args.tables)
    sys.stdout.write(dump_tables(tables))


def _handle_tables_check(args: argparse.Namespace) -> None:
    path = Path(args.path)
    tables = _load_tables_or_exit(str(path))
    namespaces = ", ".join(spec.namespace for spec in tables.namespaces.values()) or "none"
    print(f"{path}: OK (namespaces: {namespaces})")


def _add_tables_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--tables",
        default=None,
        help=(
            "Classification tables: a preset name "
            f"({', '.join(available_presets())}) or a YAML file. Defaults to extended."
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2dream",
        description="Convert HTML documents into dream-html DSL source.",
    )
    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert an HTML document to DSL source.",
        description="Parse HTML, select the root element and emit DSL source.",
    )
    convert_parser.add_argument(
        "--in",
        dest="input",
        help="Path to the HTML file (defaults to stdin).",
    )
    destination = convert_parser.add_mutually_exclusive_group()
    destination.add_argument(
        "--out",
        dest="output",
        help="Path to write the DSL source (defaults to stdout).",
    )
    destination.add_argument(
        "--clipboard",
        action="store_true",
        help="Copy the DSL source to the system clipboard.",
    )
    convert_parser.add_argument(
        "--selector",
        default=None,
        help=(
            "CSS selector for the root element to convert. Defaults to the html "
            "element, or the single top-level element of a fragment."
        ),
    )
    convert_parser.add_argument(
        "--wrap",
        metavar="NAME",
        help="Wrap the output in 'let NAME = ...' with Dream_html opened.",
    )
    convert_parser.add_argument(
        "--skip-blank-text",
        dest="skip_blank_text",
        action="store_true",
        help="Drop whitespace-only text nodes between elements.",
    )
    _add_tables_argument(convert_parser)
    convert_parser.set_defaults(func=_handle_convert)

    tables_parser = subparsers.add_parser(
        "tables",
        help="Classification table utilities",
        description="Inspect and validate classification tables.",
    )
    tables_subparsers = tables_parser.add_subparsers(dest="tables_command")

    show_parser = tables_subparsers.add_parser(
        "show",
        help="Print resolved tables as YAML.",
    )
    _add_tables_argument(show_parser)
    show_parser.set_defaults(func=_handle_tables_show)

    check_parser = tables_subparsers.add_parser(
        "check",
        help="Validate a tables YAML file.",
    )
    check_parser.add_argument("path", help="Path to the tables YAML file.")
    check_parser.set_defaults(func=_handle_tables_check)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
