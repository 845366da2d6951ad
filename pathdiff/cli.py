#!/usr/bin/env python3
# ruff: noqa: T201
import argparse
import logging
import os
import sys
import time

from rich.console import Console

from pathdiff.comparators import get_comparator
from pathdiff.differ import DEFAULT_SOLVER, SOLVERS, solve
from pathdiff.render import colorize_unified, render, render_rich, unified_diff


logger = logging.getLogger(__name__)


def read_lines(path: str) -> list[str]:
    """
    Reads a UTF-8 text file and splits it on '\\n'.
    A trailing newline leaves an empty last line.
    """
    try:
        with open(path, encoding='utf-8') as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not read file at '{path}'") from e
    return contents.split('\n')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='pathdiff', description="Show a shortest line edit script between two files.")
    parser.add_argument("file1", help="Original file")
    parser.add_argument("file2", help="Modified file")

    parser.add_argument("--solver", default=os.environ.get("PATHDIFF_SOLVER", DEFAULT_SOLVER),
                        help=f"Search strategy: {', '.join(SOLVERS)} (default: $PATHDIFF_SOLVER or {DEFAULT_SOLVER})")
    parser.add_argument("--compare", default=os.environ.get("PATHDIFF_COMPARE", "ignore-leading-whitespace"),
                        help="Line comparator (default: $PATHDIFF_COMPARE or ignore-leading-whitespace)")
    parser.add_argument("-w", "--ignore-leading-whitespace", dest="compare", action="store_const",
                        const="ignore-leading-whitespace", help="Shortcut for --compare ignore-leading-whitespace")
    parser.add_argument("--format", choices=["plain", "unified"],
                        help="Output format (default: plain, or unified when -U is given)")
    parser.add_argument("-U", "--unified", dest="context", type=int, metavar="N",
                        help="Context lines for the unified format, implies --format unified (default: 3)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log solver statistics to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Exit status: 0 if the files match, 1 if they differ or on error."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.context is not None:
        if args.format == "plain":
            parser.error("-U/--unified cannot be used with --format plain")
        if args.context < 0:
            parser.error("-U/--unified must not be negative")
        args.format = "unified"
    else:
        args.format = args.format or "plain"
        args.context = 3

    if not logging.root.handlers:
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                            format='%(levelname)s: %(message)s')

    try:
        equal = get_comparator(args.compare)
        lines_a = read_lines(args.file1)
        lines_b = read_lines(args.file2)

        start_time = time.perf_counter()
        path = solve(lines_a, lines_b, equal, args.solver)
        logger.info(f"{args.solver}: {path.cost} edits in {time.perf_counter() - start_time:.4f}s")
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    script = path.sequence
    color = not args.no_color

    if args.format == 'unified':
        fromdate = time.ctime(os.stat(args.file1).st_mtime)
        todate = time.ctime(os.stat(args.file2).st_mtime)
        lines = list(unified_diff(lines_a, lines_b, script, args.file1, args.file2,
                                  fromdate, todate, context=args.context))
        if color:
            Console(highlight=False).print(colorize_unified(lines), end='', soft_wrap=True)
        else:
            sys.stdout.writelines(lines)
    elif color:
        Console(highlight=False).print(render_rich(script), end='', soft_wrap=True)
    else:
        sys.stdout.write(render(script))

    return 1 if path.cost else 0


if __name__ == "__main__":
    sys.exit(main())
