from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path

import tomllib
from rich.console import Console
from rich.text import Text

from .errors import YoureiError
from .excerpt import ExcerptFormatter, FormatOptions
from .fetch import default_base_url, default_timeout, search_excerpts
from .logging_utils import set_debug_logging
from .styles import PLAIN_STYLES, TERMINAL_STYLES


_PYPROJECT_PATH = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"


def package_version() -> str:
    """Installed distribution version, else the version of a source checkout."""
    try:
        return metadata.version("yourei")
    except metadata.PackageNotFoundError:
        pass
    if not _PYPROJECT_PATH.is_file():
        return "0.0.0+unknown"
    try:
        project = tomllib.loads(_PYPROJECT_PATH.read_text(encoding="utf-8")).get("project", {})
    except tomllib.TOMLDecodeError:
        return "0.0.0+unknown"
    return str(project.get("version") or "0.0.0+unknown")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="yourei",
        description="Show Japanese example sentences for a word from yourei.jp.",
    )
    ap.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"yourei {package_version()}",
    )
    ap.add_argument("word", help="Word to search examples for")
    ap.add_argument(
        "-n",
        "--number",
        type=_positive_int,
        default=1,
        help="Number of examples to return (default: 1).",
    )
    ap.add_argument(
        "-o",
        "--offset",
        type=_non_negative_int,
        default=0,
        help="Number of examples to skip before returning the next NUMBER examples.",
    )
    ap.add_argument(
        "-f",
        "--furigana",
        action="store_true",
        help="Show underlined furigana where the source text uses ruby.",
    )
    ap.add_argument(
        "-e",
        "--emphasize",
        action="store_true",
        help="Emphasize the searched word in green.",
    )
    ap.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: $YOUREI_TIMEOUT or 30).",
    )
    ap.add_argument(
        "--base-url",
        default=None,
        help="Override the example site URL (default: $YOUREI_BASE_URL or https://yourei.jp).",
    )
    ap.add_argument(
        "--no-color",
        action="store_true",
        help="Print plain text without underline or color.",
    )
    ap.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging (requests, generated matchers).",
    )
    return ap


def _run(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    styles = PLAIN_STYLES if args.no_color else TERMINAL_STYLES
    formatter = ExcerptFormatter(
        FormatOptions(
            word=args.word,
            furigana=args.furigana,
            emphasize=args.emphasize,
            styles=styles,
        )
    )
    excerpts = search_excerpts(
        args.word,
        number=args.number,
        offset=args.offset,
        timeout=args.timeout or default_timeout(),
        base_url=args.base_url or default_base_url(),
    )
    if not excerpts:
        err_console.print(f"No examples found for {args.word}.", markup=False, highlight=False)
        return 0
    for excerpt in excerpts:
        console.print(Text.from_ansi(formatter.format(excerpt)), soft_wrap=True)
        console.print()
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.word:
        parser.error("word must not be empty")
    set_debug_logging(args.debug)

    console = Console(no_color=args.no_color, highlight=False)
    err_console = Console(stderr=True, highlight=False)
    try:
        return _run(args, console, err_console)
    except YoureiError as exc:
        err_console.print(f"{exc.stage} failed: {exc}", markup=False)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
