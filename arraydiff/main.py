#!/usr/bin/env python3
"""
ArrayDiff

A CLI tool for comparing any number of value lists pairwise.
Lists may be typed as JSON arrays or as comma-separated values.

Usage:
    python -m arraydiff.main compare <list> <list> ...   Compare lists pairwise
    python -m arraydiff.main parse <text>                 Show how text is parsed
    python -m arraydiff.main tui [<list> ...]             Open the terminal UI

Examples:
    arraydiff compare "[1, 2, 3]" "2, 3, 4" -n X -n Y
    arraydiff compare -f left.txt -f right.txt --format json
    arraydiff parse "1, 2, true, hello"

Lists starting with a minus sign ("-1,2") are taken as list text, not options.
Everything after "--" is list text as well:
    arraydiff compare -n X -n Y -- "-1, 2" "2, 3"
"""

import argparse
import logging
import re
import sys

from arraydiff.engine import ParseError, parse
from arraydiff.report import (
    describe_values,
    render_json,
    render_text,
    render_values_json,
    summarize,
)
from arraydiff.session import ComparisonSession

# Tokens argparse would otherwise read as option flags: "-1,2", "-.5, 3"
NEGATIVE_LIST_PATTERN = re.compile(r"-[0-9.]")


def protect_negative_lists(argv: list[str]) -> list[str]:
    """Keep list text that starts with a negative number out of option parsing.

    argparse treats any token starting with "-" as an option unless it is a
    bare negative number. A leading space hides the "-" from argparse; the
    parser trims it off again.
    """
    return [f" {arg}" if NEGATIVE_LIST_PATTERN.match(arg) else arg for arg in argv]


def read_list_file(path: str) -> str:
    """Read one list's raw text from a file."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def collect_texts(args) -> list[str]:
    """Gather raw list texts from positional arguments and --file options."""
    texts = list(args.lists)
    for path in args.files or []:
        try:
            texts.append(read_list_file(path))
        except FileNotFoundError:
            print(f"Error: File not found: {path}", file=sys.stderr)
            sys.exit(1)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: Cannot read {path}: {e}", file=sys.stderr)
            sys.exit(1)
    return texts


# ============== Commands ==============

def cmd_compare(args):
    """Compare every pair of lists."""
    session = ComparisonSession.from_texts(collect_texts(args), args.names)
    outcome = session.evaluate()

    if not outcome.ok:
        for index, error in sorted(outcome.errors.items()):
            print(f"Error in {session.label(index)}: {error}", file=sys.stderr)
        sys.exit(1)

    if args.format == "json":
        print(render_json(outcome.results))
        return

    if args.summary and outcome.results:
        header = f"{'LEFT':<20} {'RIGHT':<20} {'COMMON':<8} {'ONLY_LEFT':<10} {'ONLY_RIGHT'}"
        print("-" * len(header))
        print(header)
        print("-" * len(header))
        for result in outcome.results:
            counts = summarize(result)
            print(f"{result.left_name[:20]:<20} {result.right_name[:20]:<20} "
                  f"{counts['intersection']:<8} {counts['only_in_left']:<10} "
                  f"{counts['only_in_right']}")
        print("-" * len(header))
        return

    print(render_text(outcome.results))


def cmd_parse(args):
    """Show the typed values parsed from one text block."""
    try:
        values = parse(args.text)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == "json":
        print(render_values_json(values))
        return

    described = describe_values(values)
    header = f"{'IDX':<6} {'KIND':<10} {'VALUE'}"
    print("-" * len(header))
    print(header)
    print("-" * len(header))
    for idx, item in enumerate(described):
        print(f"{idx:<6} {item['kind']:<10} {item['value']}")
    print("-" * len(header))
    print(f"Parsed {len(described)} values")


def cmd_tui(args):
    """Open the interactive terminal UI."""
    from arraydiff.tui.app import ArrayDiffApp

    app = ArrayDiffApp(texts=args.lists, names=args.names)
    app.run()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="ArrayDiff - Compare lists typed as JSON arrays or comma-separated values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Compare command
    compare_parser = subparsers.add_parser('compare', help='Compare lists pairwise')
    compare_parser.add_argument('lists', nargs='*', help='List text (JSON array or comma-separated values)')
    compare_parser.add_argument('-f', '--file', dest='files', action='append',
                                help='Read one list from a file (repeatable)')
    compare_parser.add_argument('-n', '--name', dest='names', action='append',
                                help='Label for the next list, in order (repeatable)')
    compare_parser.add_argument(
        '--format',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )
    compare_parser.add_argument('-s', '--summary', action='store_true',
                                help='Only show element counts per pair')
    compare_parser.set_defaults(func=cmd_compare)

    # Parse command
    parse_parser = subparsers.add_parser('parse', help='Show how text is parsed')
    parse_parser.add_argument('text', help='List text (JSON array or comma-separated values)')
    parse_parser.add_argument(
        '--format',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )
    parse_parser.set_defaults(func=cmd_parse)

    # TUI command
    tui_parser = subparsers.add_parser('tui', help='Open the terminal UI')
    tui_parser.add_argument('lists', nargs='*', help='Initial list texts')
    tui_parser.add_argument('-n', '--name', dest='names', action='append',
                            help='Label for the next list, in order (repeatable)')
    tui_parser.set_defaults(func=cmd_tui)

    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(protect_negative_lists(argv))
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
