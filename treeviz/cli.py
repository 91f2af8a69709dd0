"""Command-line front door for treeviz.

Parses CLI options, resolves the target directory, and merges user config.
Then traverses, renders, and sends the text to stdout, a file, or the clipboard.
"""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from pathlib import Path

from . import __version__
from .clipboard import copy_to_clipboard
from .config import DEFAULT_IGNORES, OutputFormat, build_ignore_set, load_user_defaults, parse_ignore_list
from .formatters import render_tree
from .paths import TargetPathError, resolve_target
from .tree_model import traverse

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when ``verbose``, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def use_system_collation() -> None:
    """Adopt the user's ``LC_COLLATE`` so sibling names sort by locale rules."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug("Keeping default collation: %s", exc)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeviz",
        description="Generate ASCII, JSON, or Markdown directory trees.",
        epilog=f"Default ignores: {', '.join(DEFAULT_IGNORES)}",
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to visualize (default: current directory).")
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="Output format (default: ascii).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=_nonnegative_int,
        default=None,
        help="Limit how many directory levels are expanded.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="NAMES",
        help="Comma-separated names to ignore (added to defaults).",
    )
    parser.add_argument("--no-default-ignores", action="store_true", help="Disable the default ignore list.")
    parser.add_argument("--follow-symlinks", action="store_true", help="Follow symbolic links (skipped by default).")
    parser.add_argument("-o", "--output", metavar="FILE", help="Also write output to FILE.")
    parser.add_argument("-c", "--copy", action="store_true", help="Copy output to clipboard.")
    parser.add_argument("--base", metavar="DIR", help="Reject target paths that resolve outside DIR.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("-v", "--version", action="version", version=f"treeviz v{__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, render the tree, and emit it.

    Fatal problems (missing or non-directory root, escaping ``--base``,
    unreadable root, unwritable ``--output``) raise ``SystemExit`` with a
    message before anything is printed. Clipboard failures only log.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    use_system_collation()

    try:
        root = resolve_target(args.path, base=args.base)
    except TargetPathError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    defaults = load_user_defaults()
    extra_ignores = list(defaults.ignore)
    for value in args.ignore:
        extra_ignores.extend(parse_ignore_list(value))
    ignore_names = build_ignore_set(extra_ignores, use_defaults=not args.no_default_ignores)
    max_depth = args.depth if args.depth is not None else defaults.max_depth
    output_format = OutputFormat(args.format) if args.format is not None else defaults.output_format
    follow_symlinks = args.follow_symlinks or defaults.follow_symlinks

    logger.debug(
        "Traversing %s (format=%s, max_depth=%s, follow_symlinks=%s, ignore=%s)",
        root,
        output_format.value,
        max_depth,
        follow_symlinks,
        sorted(ignore_names),
    )
    try:
        tree = traverse(root, ignore_names, max_depth=max_depth, follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise SystemExit(f"Error: Cannot read directory {root}: {exc.strerror or exc}") from exc

    output = render_tree(tree, output_format)

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_bytes(output.encode("utf-8", errors="surrogateescape"))
        except OSError as exc:
            raise SystemExit(f"Error: Cannot write {output_path}: {exc.strerror or exc}") from exc

    sys.stdout.write(output if output.endswith("\n") else output + "\n")

    if args.output:
        print(f"✓ Written to {args.output}", file=sys.stderr)
    if args.copy and copy_to_clipboard(output):
        print("✓ Copied to clipboard", file=sys.stderr)


if __name__ == "__main__":
    main()
