"""dayspan CLI entry point.

Usage: uv run dayspan [command]

Ranges on the command line use the same text form str(DateRange)
prints: "2020-01-01|2020-01-10" (quote it, the shell reads '|' as a pipe).
A single date stands for a one-day range.
"""
import argparse
import logging
import sys

from dayspan.domain.types import DEFAULT_STEP


def _add_extract_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "extract",
        help="Group individual dates into ranges of consecutive days.",
    )
    p.add_argument("dates", nargs="*", metavar="DATE")
    p.add_argument(
        "--normalize", action="store_true",
        help="Sort and de-duplicate the dates before grouping.",
    )


def _add_join_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "join",
        help="Merge overlapping and adjacent ranges.",
    )
    p.add_argument("ranges", nargs="+", metavar="RANGE")


def _add_intersect_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "intersect",
        help="Days covered by both sets of ranges.",
    )
    p.add_argument("--left", nargs="+", required=True, metavar="RANGE")
    p.add_argument("--right", nargs="+", required=True, metavar="RANGE")


def _add_subtract_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "subtract",
        help="Remove the days of one range from another.",
    )
    p.add_argument("minuend", metavar="MINUEND")
    p.add_argument("subtrahend", metavar="SUBTRAHEND")
    p.add_argument(
        "--explain", action="store_true",
        help="Also print what happened (DISJOINT, CONSUMED, TRIMMED, SPLIT).",
    )


def _add_days_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "days",
        help="Count the days in a range, or list them.",
    )
    p.add_argument("range", metavar="RANGE")
    p.add_argument(
        "--list", action="store_true",
        help="Print every date instead of the count.",
    )
    p.add_argument(
        "--step", default=DEFAULT_STEP,
        help=f"ISO-8601 step used with --list (default: {DEFAULT_STEP})",
    )


def _run_extract(args: argparse.Namespace) -> None:
    from dayspan.algebra.extraction import extract_ranges

    for r in extract_ranges(args.dates, normalize=args.normalize):
        print(r)


def _run_join(args: argparse.Namespace) -> None:
    from dayspan.algebra.range_sets import join_ranges
    from dayspan.domain.date_range import DateRange

    for r in join_ranges(DateRange.parse(text) for text in args.ranges):
        print(r)


def _run_intersect(args: argparse.Namespace) -> None:
    from dayspan.algebra.range_sets import intersect_ranges
    from dayspan.domain.date_range import DateRange

    left = [DateRange.parse(text) for text in args.left]
    right = [DateRange.parse(text) for text in args.right]
    for r in intersect_ranges(left, right):
        print(r)


def _run_subtract(args: argparse.Namespace) -> None:
    from dayspan.algebra.pairwise import difference
    from dayspan.domain.date_range import DateRange

    result = difference(DateRange.parse(args.minuend), DateRange.parse(args.subtrahend))
    if args.explain:
        print(result.outcome.name)
    for r in result.remainder:
        print(r)


def _run_days(args: argparse.Namespace) -> None:
    from dayspan.domain.date_range import DateRange

    r = DateRange.parse(args.range)
    # parses the step even without --list so a bad one is reported
    period = r.as_period(args.step)
    if args.list:
        for day in period:
            print(day.isoformat())
    else:
        print(r.count_days())


_COMMANDS = {
    "extract": _run_extract,
    "join": _run_join,
    "intersect": _run_intersect,
    "subtract": _run_subtract,
    "days": _run_days,
}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dayspan",
        description="Closed date-range algebra: extract, join, intersect, subtract.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log each merge step to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_extract_parser(subparsers)
    _add_join_parser(subparsers)
    _add_intersect_parser(subparsers)
    _add_subtract_parser(subparsers)
    _add_days_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        _COMMANDS[args.command](args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
