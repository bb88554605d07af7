"""Implementation of `latgroups render`."""

from __future__ import annotations

import argparse
from pathlib import Path

from latgroups.cli.common import add_grouping_arguments, session_from_args
from latgroups.core.config import dump_yaml
from latgroups.reporting.json import build_report_payload, write_report_json
from latgroups.viz.reports import generate_html_report


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("render", help="Render band map, series chart and report")
    add_grouping_arguments(parser)
    parser.add_argument("--out", required=True, help="Output folder")
    parser.set_defaults(func=cmd_render)


def cmd_render(args: argparse.Namespace) -> int:
    out_dir = Path(args.out)
    session, cfg = session_from_args(args)

    artifacts = session.render(out_dir)
    dump_yaml(cfg, out_dir / "config_resolved.yaml")
    payload = build_report_payload(session, data_path=args.data, artifacts=artifacts)
    write_report_json(payload, out_dir / "report.json")
    generate_html_report(session, artifacts, out_dir / "report.html")

    print(f"Map written to {artifacts['map']}")
    print(f"Chart written to {artifacts['chart']}")
    print(f"Report written to {out_dir / 'report.html'}")
    print(f"Report JSON written to {out_dir / 'report.json'}")
    return 0
