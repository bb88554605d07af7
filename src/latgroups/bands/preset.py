"""Canonical preset pattern matching.

The match only looks at the partition shape: the poles, mid-latitude and
tropics pairs may sit under any permutation of group ids.
"""

from __future__ import annotations

from latgroups.bands.assignment import CANONICAL_PRESET, GroupsLike, as_groups

PRESET_SIZES: tuple[int, ...] = tuple(sorted(len(members) for members in CANONICAL_PRESET.values()))


def matches_preset(assignment: GroupsLike) -> bool:
    """Return True when the groups equal the canonical preset up to relabeling."""

    groups = as_groups(assignment)
    sizes = tuple(sorted(len(members) for members in groups.values()))
    if sizes != PRESET_SIZES:
        return False

    remaining = set(groups.values())
    for target in CANONICAL_PRESET.values():
        if target not in remaining:
            return False
        remaining.discard(target)
    return True
