"""Argument helpers shared by subcommands that build a grouping."""

from __future__ import annotations

import argparse
import logging
from typing import Any

from latgroups.bands.assignment import AssignmentStore
from latgroups.core.config import resolve_config
from latgroups.core.session import GroupingSession
from latgroups.data.io import load_samples

logger = logging.getLogger(__name__)


class GroupSpecError(ValueError):
    """Raised when a --groups value cannot be parsed."""


def parse_group_spec(spec: str) -> dict[int, list[int]]:
    """Parse ``"1:0,5;2:1,4;3:2,3"`` into ``{1: [0, 5], 2: [1, 4], 3: [2, 3]}``.

    A group may be left empty (``"1:;2:1"``). Band ids are validated by the store.
    """

    groups: dict[int, list[int]] = {}
    for chunk in spec.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        gid_text, sep, bands_text = chunk.partition(":")
        if not sep:
            raise GroupSpecError(f"Expected '<group>:<band>,<band>' but got {chunk!r}")
        try:
            gid = int(gid_text)
            band_ids = [int(b) for b in bands_text.split(",") if b.strip()]
        except ValueError as exc:
            raise GroupSpecError(f"Non-integer id in group spec {chunk!r}") from exc
        if gid in groups:
            raise GroupSpecError(f"Group {gid} listed more than once")
        groups[gid] = band_ids
    return groups


def add_grouping_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("data", help="Zonal anomaly table (csv or parquet) with year, lat, tas columns")
    parser.add_argument("--config", default=None, help="Config YAML")
    start = parser.add_mutually_exclusive_group()
    start.add_argument("--groups", default=None, help="Initial grouping, e.g. '1:0,5;2:1,4;3:2,3'")
    start.add_argument("--clear", action="store_true", help="Start with every band unassigned")
    parser.add_argument(
        "--click",
        dest="clicks",
        type=int,
        action="append",
        default=[],
        metavar="BAND",
        help="Cycle a band's group (repeatable, applied in order)",
    )


def session_from_args(args: argparse.Namespace) -> tuple[GroupingSession, dict[str, Any]]:
    overrides: dict[str, Any] = {}
    if args.clear:
        overrides["grouping"] = {"initial": "empty"}
    cfg = resolve_config(config_path=args.config, overrides=overrides)

    samples = load_samples(args.data, columns=cfg["data"]["columns"])
    session = GroupingSession.from_config(samples, cfg)
    if args.groups is not None:
        groups = parse_group_spec(args.groups)
        try:
            session.store = AssignmentStore.from_groups(groups)
        except (KeyError, ValueError) as exc:
            raise GroupSpecError(exc.args[0] if exc.args else str(exc)) from exc
        session.refresh()
    for band_id in args.clicks:
        try:
            session.click(band_id)
        except KeyError as exc:
            raise GroupSpecError(exc.args[0] if exc.args else str(exc)) from exc
    logger.debug("Grouping: %r", session.store)
    return session, cfg
