"""routepath CLI — inspect, match, and build paths from the shell.

Entry point registered as ``routepath`` in ``pyproject.toml``::

    [project.scripts]
    routepath = "routepath.cli:main"
"""

import argparse
import logging
import sys

from routepath.config import PathConfig


def _build_config(args: argparse.Namespace) -> PathConfig:
    return PathConfig(case_sensitive=args.case_sensitive, strict_groups=args.strict)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routepath`` command."""
    parser = argparse.ArgumentParser(
        prog="routepath",
        description="routepath — compile URL patterns, match paths, and build paths.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Match paths case-sensitively",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject patterns with unbalanced optional groups",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routepath names --------------------------------------------------
    names_parser = subparsers.add_parser("names", help="List a pattern's parameter names")
    names_parser.add_argument("pattern", help='Route pattern (e.g. "/users/:id")')

    # -- routepath match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Extract params from a path")
    match_parser.add_argument("pattern", help='Route pattern (e.g. "/users/:id")')
    match_parser.add_argument("path", help='Concrete path (e.g. "/users/42")')

    # -- routepath build --------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a path from params")
    build_parser.add_argument("pattern", help='Route pattern (e.g. "/users/:id")')
    build_parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Parameter value (repeatable)",
    )
    build_parser.add_argument(
        "-s",
        "--splat",
        action="append",
        default=[],
        metavar="VALUE",
        help="Splat value, consumed in order (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "names":
        from routepath.cli._commands import run_names

        run_names(args)
    elif args.command == "match":
        from routepath.cli._commands import run_match

        run_match(args, _build_config(args))
    elif args.command == "build":
        from routepath.cli._commands import run_build

        run_build(args, _build_config(args), build_parser)
