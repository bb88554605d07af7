"""Implementation of `latgroups series`."""

from __future__ import annotations

import argparse

from latgroups.cli.common import add_grouping_arguments, session_from_args
from latgroups.data.io import write_series_csv
from latgroups.ops.aggregate import series_to_frame


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("series", help="Compute group mean anomaly series")
    add_grouping_arguments(parser)
    parser.add_argument("--out", default=None, help="Write series as long-format csv")
    parser.set_defaults(func=cmd_series)


def cmd_series(args: argparse.Namespace) -> int:
    session, _ = session_from_args(args)

    if args.out:
        path = write_series_csv(session.series, args.out)
        print(f"Wrote {sum(len(s.points) for s in session.series)} points to {path}")
    else:
        frame = series_to_frame(session.series)
        if frame.empty:
            print("No series")
        else:
            print(frame.to_string(index=False))
    print(f"Preset pattern: {'matched' if session.annotated else 'not matched'}")
    return 0
