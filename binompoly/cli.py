"""Command-line driver: ``binompoly <n> <x> [--out PATH]``."""
from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import List, Optional

from .binom import BACKENDS, DEFAULT_BACKEND, BackendUnavailableError
from .config import ReportConfig
from .report import build_report, resolve_output_path, should_persist, write_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID = 2
EXIT_CHECK_FAILED = 3

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binompoly",
        description="Expand (x+1)^n, print the polynomial and evaluate it step by step.",
        epilog="Example: binompoly 5 2 --out results.txt",
    )
    parser.add_argument("n", nargs="?", help="degree, a non-negative integer")
    parser.add_argument("x", nargs="?", help="evaluation point, an integer (may be negative)")
    parser.add_argument("--out", metavar="PATH", default=None, help="also write the report to PATH")
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=DEFAULT_BACKEND,
        help="coefficient generator (default: %(default)s)",
    )
    parser.add_argument(
        "--show-coefficients",
        action="store_true",
        help="list the coefficient row after the polynomial",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="cross-check the result against (x+1)^n computed directly",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log stage timings to stderr")
    return parser


def _parse_int(token: str) -> Optional[int]:
    if not _INT_RE.fullmatch(token):
        return None
    return int(token)


def _allow_unbounded_int_strings() -> None:
    # Python 3.11+ caps int <-> str conversion at 4300 digits by default.
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def _attach_stderr_handler(verbose: bool) -> logging.Handler:
    """Send package log records at WARNING (INFO when verbose) to the current stderr."""

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s %(levelname)s %(message)s"))
    package_logger = logging.getLogger("binompoly")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return handler


def main(argv: Optional[List[str]] = None, config: Optional[ReportConfig] = None) -> int:
    _allow_unbounded_int_strings()
    parser = _build_parser()
    args = parser.parse_args(argv)

    package_logger = logging.getLogger("binompoly")
    previous_level = package_logger.level
    handler = _attach_stderr_handler(args.verbose)
    try:
        return _run(parser, args, config or ReportConfig())
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace, config: ReportConfig) -> int:
    if args.x is None:
        parser.print_usage(sys.stdout)
        print(parser.epilog)
        return EXIT_USAGE

    n = _parse_int(args.n)
    if n is None or n < 0:
        print("n must be a non-negative integer", file=sys.stderr)
        return EXIT_INVALID
    x = _parse_int(args.x)
    if x is None:
        print("x must be an integer", file=sys.stderr)
        return EXIT_INVALID

    try:
        report = build_report(
            n,
            x,
            backend=args.backend,
            show_coefficients=args.show_coefficients,
            check=args.check,
        )
    except BackendUnavailableError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID

    text = report.render()
    print(text, end="")

    if should_persist(n, args.out, config):
        write_report(text, resolve_output_path(args.out, config))

    if report.check is not None and not report.check.matches:
        logger.error(f"Stepwise result differs from ({x} + 1)^{n}")
        return EXIT_CHECK_FAILED
    return EXIT_OK
