import itertools

import pytest

from latgroups.bands.assignment import CANONICAL_PRESET, AssignmentStore
from latgroups.bands.catalog import UnknownBandError


def test_store_starts_at_canonical_preset():
    store = AssignmentStore()
    assert store.groups() == CANONICAL_PRESET
    assert store.group_of(0) == 1
    assert store.group_of(3) == 3


@pytest.mark.parametrize("band_id", range(6))
def test_four_clicks_close_the_cycle(band_id):
    store = AssignmentStore(preset=False)
    seen = [store.cycle(band_id) for _ in range(4)]
    assert seen == [1, 2, 3, None]
    assert store.group_of(band_id) is None
    assert all(not members for members in store.groups().values())


def test_cycle_from_group_three_leaves_band_unassigned():
    store = AssignmentStore()
    assert store.group_of(2) == 3
    assert store.cycle(2) is None
    assert 2 not in store.members(3)
    assert all(2 not in members for members in store.groups().values())


def test_partition_invariant_over_click_sequences():
    store = AssignmentStore()
    for band_id in itertools.islice(itertools.cycle([0, 3, 3, 5, 1, 0, 2, 4, 4, 4]), 200):
        store.cycle(band_id)
        groups = store.groups()
        counts = [sum(b in members for members in groups.values()) for b in range(6)]
        assert all(c <= 1 for c in counts)


def test_reset_then_preset_restores_canonical_from_any_state():
    store = AssignmentStore(preset=False)
    for band_id in [0, 0, 1, 5, 5, 5, 2]:
        store.cycle(band_id)
    store.reset()
    assert all(not members for members in store.groups().values())
    store.apply_preset()
    assert store.groups() == CANONICAL_PRESET


def test_apply_preset_is_idempotent():
    once = AssignmentStore(preset=False)
    once.apply_preset()
    twice = AssignmentStore(preset=False)
    twice.apply_preset()
    twice.apply_preset()
    assert once == twice


def test_unknown_band_is_rejected_without_mutation():
    store = AssignmentStore()
    before = store.snapshot()
    with pytest.raises(UnknownBandError):
        store.cycle(6)
    assert store.snapshot() == before


def test_from_groups_rejects_shared_band():
    with pytest.raises(ValueError, match="both group"):
        AssignmentStore.from_groups({1: [0, 1], 2: [1]})


def test_from_groups_and_copy_are_independent():
    store = AssignmentStore.from_groups({2: [0, 5]})
    clone = store.copy()
    clone.cycle(0)
    assert store.group_of(0) == 2
    assert clone.group_of(0) == 3
    assert store.members(1) == frozenset()
