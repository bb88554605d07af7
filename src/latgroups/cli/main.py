"""Main CLI entrypoint."""

from __future__ import annotations

import argparse
import sys

from latgroups.cli import bands, render, series
from latgroups.cli.common import GroupSpecError
from latgroups.core.config import ConfigError
from latgroups.core.logging import setup_logging
from latgroups import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="latgroups", description="Group latitude bands and chart their mean temperature anomaly"
    )
    subparsers = parser.add_subparsers(dest="command")

    bands.register(subparsers)
    series.register(subparsers)
    render.register(subparsers)

    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=getattr(args, "verbose", False))

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return int(args.func(args))
    except (ConfigError, GroupSpecError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Interrupted")
        return 130


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
