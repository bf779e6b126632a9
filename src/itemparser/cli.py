"""Command-line utility for trying auto-fill on a text file.

Usage:
    parse-items notes.txt --title 0:5 --body 7:14
    parse-items notes.txt --title 0:5 --body 7:14 --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from itemparser import setup_logging
from itemparser.errors import AutoFillError
from itemparser.models import ItemRecord, Span
from itemparser.parsing import reduce_to_items, run_autofill

console = Console()


def _span_arg(value: str) -> Span:
    """Parse ``START:END`` into a span."""
    start_text, sep, end_text = value.partition(":")
    if not sep:
        msg = f"expected START:END, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    try:
        start, end = int(start_text), int(end_text)
    except ValueError:
        msg = f"offsets must be integers, got {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if start < 0 or end <= start:
        msg = f"need 0 <= START < END, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return Span.between(start, end)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parse-items",
        description="Auto-fill title/body highlights from examples and list the items.",
    )
    parser.add_argument("text_file", type=Path, help="UTF-8 text to split")
    parser.add_argument(
        "--title",
        action="append",
        default=[],
        type=_span_arg,
        metavar="START:END",
        help="Example title highlight (repeatable)",
    )
    parser.add_argument(
        "--body",
        action="append",
        default=[],
        type=_span_arg,
        metavar="START:END",
        help="Example body highlight (repeatable)",
    )
    parser.add_argument(
        "--no-trim",
        dest="trim",
        action="store_const",
        const=False,
        default=None,
        help="Keep line indentation and trailing blanks",
    )
    parser.add_argument(
        "--wrap-fallback",
        choices=("trailing_gap", "first_delimiter", "fail"),
        default=None,
        help="Override PARSER__WRAP_FALLBACK",
    )
    parser.add_argument("--json", action="store_true", help="Print items as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _print_items(items: list[ItemRecord], con: Console) -> None:
    """Print items as a Rich table."""
    if not items:
        con.print("[yellow]No items found.[/]")
        return

    table = Table(title=f"Items ({len(items)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Body")

    for number, item in enumerate(items, start=1):
        table.add_row(
            str(number),
            escape(item.title) if item.title is not None else "[dim]-[/]",
            escape(item.body) if item.body is not None else "[dim]-[/]",
        )

    con.print(table)


def parse_items(argv: list[str] | None = None, *, con: Console | None = None) -> int:
    """Run auto-fill on a file and print the resulting items.

    Returns:
        Process exit status.
    """
    con = con or console
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    setup_logging("DEBUG" if args.verbose else None)

    try:
        text = args.text_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        con.print(f"[red]Error:[/] cannot read {args.text_file}: {exc}")
        return 1

    try:
        result = run_autofill(
            text,
            args.title,
            args.body,
            trim=args.trim,
            wrap_fallback=args.wrap_fallback,
        )
    except AutoFillError as exc:
        con.print(f"[red]Error:[/] auto-fill not applicable: {exc}")
        return 1

    items = reduce_to_items(result.text, result.title_spans, result.body_spans)

    if args.json:
        con.print_json(json.dumps([item.to_dict() for item in items]))
    else:
        if result.wrap_fallback is not None:
            con.print(
                f"[yellow]Warning:[/] wrap-around delimiter guessed "
                f"({result.wrap_fallback})"
            )
        _print_items(items, con)
    return 0


def main() -> None:
    """Entry point for ``parse-items``."""
    sys.exit(parse_items())
