"""Band to group assignment state.

The assignment is held as one slot per catalog band, each slot holding ``None``
(unassigned) or a group id in ``GROUP_IDS``. A band can therefore never sit in
two groups at once. Clicking a band advances its slot through the 4-cycle
``None -> 1 -> 2 -> 3 -> None``.
"""

from __future__ import annotations

from typing import Collection, Mapping, Sequence, Union

from latgroups.bands.catalog import LATITUDE_BANDS, Band, UnknownBandError

GROUP_IDS: tuple[int, ...] = (1, 2, 3)

# poles, mid-latitudes, tropics
CANONICAL_PRESET: dict[int, frozenset[int]] = {
    1: frozenset({0, 5}),
    2: frozenset({1, 4}),
    3: frozenset({2, 3}),
}


class AssignmentStore:
    """Mutable band -> optional group mapping over a fixed band catalog."""

    def __init__(self, catalog: Sequence[Band] = LATITUDE_BANDS, *, preset: bool = True) -> None:
        self._catalog = tuple(catalog)
        self._index = {band.id: i for i, band in enumerate(self._catalog)}
        self._slots: list[int | None] = [None] * len(self._catalog)
        if preset:
            self.apply_preset()

    @classmethod
    def from_groups(
        cls,
        groups: Mapping[int, Sequence[int] | frozenset[int] | set[int]],
        catalog: Sequence[Band] = LATITUDE_BANDS,
    ) -> "AssignmentStore":
        """Build a store from a ``{group_id: band_ids}`` mapping.

        Raises ValueError if a band is listed under more than one group or a group id is unknown.
        """

        store = cls(catalog, preset=False)
        slots: list[int | None] = [None] * len(store._catalog)
        for group_id, band_ids in groups.items():
            gid = int(group_id)
            if gid not in GROUP_IDS:
                raise ValueError(f"Unknown group id {group_id!r}. Valid ids: {list(GROUP_IDS)}")
            for band_id in band_ids:
                pos = store._position(int(band_id))
                if slots[pos] is not None and slots[pos] != gid:
                    raise ValueError(f"Band {band_id} assigned to both group {slots[pos]} and group {gid}")
                slots[pos] = gid
        store._slots = slots
        return store

    @property
    def catalog(self) -> tuple[Band, ...]:
        return self._catalog

    def group_of(self, band_id: int) -> int | None:
        return self._slots[self._position(band_id)]

    def members(self, group_id: int) -> frozenset[int]:
        return frozenset(band.id for band, slot in zip(self._catalog, self._slots) if slot == group_id)

    def groups(self) -> dict[int, frozenset[int]]:
        """Snapshot of every group, empty groups included, keyed in ascending group order."""

        return {gid: self.members(gid) for gid in GROUP_IDS}

    def snapshot(self) -> dict[int, int | None]:
        """Snapshot of ``band_id -> group_id`` for every catalog band."""

        return {band.id: slot for band, slot in zip(self._catalog, self._slots)}

    def cycle(self, band_id: int) -> int | None:
        """Advance one band to its next state and return the new group (None when unassigned)."""

        pos = self._position(band_id)
        current = self._slots[pos]
        if current is None:
            nxt: int | None = GROUP_IDS[0]
        elif current < GROUP_IDS[-1]:
            nxt = current + 1
        else:
            nxt = None
        self._slots[pos] = nxt
        return nxt

    def reset(self) -> None:
        self._slots = [None] * len(self._catalog)

    def apply_preset(self) -> None:
        slots: list[int | None] = [None] * len(self._catalog)
        for gid, band_ids in CANONICAL_PRESET.items():
            for band_id in band_ids:
                if band_id in self._index:
                    slots[self._index[band_id]] = gid
        self._slots = slots

    def copy(self) -> "AssignmentStore":
        other = AssignmentStore(self._catalog, preset=False)
        other._slots = list(self._slots)
        return other

    def _position(self, band_id: int) -> int:
        try:
            return self._index[band_id]
        except KeyError:
            raise UnknownBandError(
                f"Unknown band id {band_id!r}. Valid ids: {sorted(self._index)}"
            ) from None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssignmentStore):
            return NotImplemented
        return self._catalog == other._catalog and self._slots == other._slots

    def __repr__(self) -> str:
        parts = ", ".join(f"{gid}: {sorted(members)}" for gid, members in self.groups().items())
        return f"AssignmentStore({{{parts}}})"


GroupsLike = Union[AssignmentStore, Mapping[int, Collection[int]]]


def as_groups(assignment: GroupsLike) -> dict[int, frozenset[int]]:
    """Normalize a store or a ``{group_id: band_ids}`` mapping to frozensets keyed by every group id."""

    if isinstance(assignment, AssignmentStore):
        return assignment.groups()
    return {gid: frozenset(int(b) for b in assignment.get(gid, ())) for gid in GROUP_IDS}
