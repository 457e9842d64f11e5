"""Command-line entry point.

Usage:
    python -m work_registry
    python -m work_registry hello:///team --option greeting=Hi
    python -m work_registry --list
    python -m work_registry --config
"""

import argparse
from collections.abc import Sequence
import logging
import sys

from .config import resolve_config
from .exceptions import InvalidArgumentError, ProviderNotFoundError
from .registry import get_default_registry
from .works import get_work, new_work

# ruff: noqa: T201


def _parse_option(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, val


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve a work by URI and execute it",
        prog="python -m work_registry",
    )
    parser.add_argument("uri", nargs="?", default="hello", help="Work URI (default: hello)")
    parser.add_argument(
        "-o",
        "--option",
        action="append",
        default=[],
        type=_parse_option,
        metavar="KEY=VALUE",
        help="Provider option; implies --new",
    )
    parser.add_argument(
        "--new", action="store_true", help="Create the work instead of looking it up"
    )
    parser.add_argument(
        "--list", action="store_true", help="List installed provider schemes and exit"
    )
    parser.add_argument(
        "--config", action="store_true", help="Show resolved configuration and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config:
        print(resolve_config().audit())
        return 0

    if args.list:
        for scheme in get_default_registry().schemes():
            print(scheme)
        return 0

    try:
        if args.new or args.option:
            work = new_work(args.uri, dict(args.option))
        else:
            work = get_work(args.uri)
    except (ProviderNotFoundError, InvalidArgumentError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = work.execute()
    if result is not None:
        print(result)
    return 0
