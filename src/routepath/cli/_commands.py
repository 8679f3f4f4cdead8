"""``routepath names|match|build`` — subcommand implementations."""

import argparse
import json
import sys

from routepath.config import PathConfig
from routepath.errors import PatternSyntaxError
from routepath.pattern.extract import extract_param_names, extract_params
from routepath.pattern.inject import SplatSequence, inject_params


def run_names(args: argparse.Namespace) -> None:
    """Print one parameter name per line, in pattern order."""
    for name in extract_param_names(args.pattern):
        print(name)


def run_match(args: argparse.Namespace, config: PathConfig) -> None:
    """Print the extracted params as JSON. Exits 1 when the path does not match."""
    try:
        params = extract_params(args.pattern, args.path, config=config)
    except PatternSyntaxError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if params is None:
        print(f"No match: {args.path!r} does not match {args.pattern!r}", file=sys.stderr)
        raise SystemExit(1)

    print(json.dumps(params, indent=2, sort_keys=True))


def run_build(
    args: argparse.Namespace,
    config: PathConfig,
    parser: argparse.ArgumentParser,
) -> None:
    """Print the injected path. Exits 1 when a required value is missing."""
    params: dict[str, object] = {}
    for item in args.param:
        name, sep, value = item.partition("=")
        if not sep or not name:
            parser.error(f"--param expects NAME=VALUE, got {item!r}")
        params[name] = value
    if args.splat:
        params["splat"] = SplatSequence(tuple(args.splat))

    try:
        result = inject_params(args.pattern, params, config=config)
    except PatternSyntaxError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not result:
        print(f"Error: {result.error}", file=sys.stderr)
        raise SystemExit(1)

    print(result.path)
