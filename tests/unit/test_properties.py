"""Property-based tests for the differ using Hypothesis.

These tests check the invariants every change script must satisfy
(validity, exclusivity, ordering, symmetry) over randomly generated
sequences, including sequences with repeated identities.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from hypothesis import given, settings
from hypothesis import strategies as st

from seqdiff.config import DiffConfig
from seqdiff.engine.apply import apply_changes, group_changes
from seqdiff.engine.differ import SequenceDiffer
from seqdiff.models import ChangeType, Delete, Insert, Move, Replace


@dataclass(frozen=True)
class Row:
    key: str
    content: int

    @property
    def diff_id(self) -> str:
        return self.key

    def compare_content(self, other: Row) -> bool:
        return self.content == other.content


# ---------------------------------------------------------------------------
# Reusable strategies
# ---------------------------------------------------------------------------

# A small alphabet forces repeated identities and plenty of reorders.
_keys_st = st.lists(st.sampled_from("abcdefgh"), max_size=25)

_rows_st = st.lists(
    st.builds(Row, key=st.sampled_from("abcdef"), content=st.integers(0, 2)),
    max_size=25,
)

_config_st = st.builds(
    DiffConfig,
    strategy=st.sampled_from(["lis", "lcs"]),
    detect_moves=st.booleans(),
)


def _old_side(changes) -> Counter:
    """Old indices claimed by each change."""
    claimed: Counter = Counter()
    for change in changes:
        if isinstance(change, Delete):
            claimed[change.index] += 1
        elif isinstance(change, (Move, Replace)):
            claimed[change.old_index] += 1
    return claimed


def _new_side(changes) -> Counter:
    """New indices claimed by each change."""
    claimed: Counter = Counter()
    for change in changes:
        if isinstance(change, Insert):
            claimed[change.index] += 1
        elif isinstance(change, (Move, Replace)):
            claimed[change.new_index] += 1
    return claimed


# ---------------------------------------------------------------------------
# 1. Validity
# ---------------------------------------------------------------------------


class TestValidity:

    @given(old=_keys_st, new=_keys_st, config=_config_st)
    def test_apply_reproduces_new(self, old, new, config):
        changes = SequenceDiffer(config).diff(old, new)
        assert apply_changes(old, changes) == new

    @given(old=_rows_st, new=_rows_st, config=_config_st)
    def test_apply_reproduces_new_with_content_changes(self, old, new, config):
        changes = SequenceDiffer(config).diff(old, new)
        assert apply_changes(old, changes) == new

    @given(old=_rows_st, new=_rows_st, config=_config_st)
    def test_grouped_batch_then_reload_reproduces_new(self, old, new, config):
        grouped = group_changes(SequenceDiffer(config).diff(old, new))
        rows = list(old)
        for i in sorted([*grouped.deletes, *(o for o, _ in grouped.moves)], reverse=True):
            del rows[i]
        placed = {j: new[j] for j in grouped.inserts}
        placed.update({j: old[i] for i, j in grouped.moves})
        for j in sorted(placed):
            rows.insert(j, placed[j])
        for j in grouped.replaces:
            rows[j] = new[j]
        assert rows == new


# ---------------------------------------------------------------------------
# 2. Completeness / exclusivity
# ---------------------------------------------------------------------------


class TestExclusivity:

    @given(old=_rows_st, new=_rows_st)
    def test_each_index_claimed_at_most_once(self, old, new):
        changes = SequenceDiffer().diff(old, new)
        assert all(count == 1 for count in _old_side(changes).values())
        assert all(count == 1 for count in _new_side(changes).values())

    @given(old=_rows_st, new=_rows_st)
    def test_unclaimed_positions_are_unchanged(self, old, new):
        changes = SequenceDiffer().diff(old, new)
        unchanged_old = [old[i] for i in range(len(old)) if i not in _old_side(changes)]
        unchanged_new = [new[j] for j in range(len(new)) if j not in _new_side(changes)]
        assert unchanged_old == unchanged_new

    @given(old=_keys_st, new=_keys_st)
    def test_counts_balance(self, old, new):
        kinds = Counter(c.kind for c in SequenceDiffer().diff(old, new))
        matched = len(old) - kinds[ChangeType.DELETE]
        assert matched == len(new) - kinds[ChangeType.INSERT]
        assert matched == sum((Counter(old) & Counter(new)).values())


# ---------------------------------------------------------------------------
# 3. Idempotence of no-op
# ---------------------------------------------------------------------------


class TestNoOp:

    @given(items=_rows_st, config=_config_st)
    def test_diff_with_self_is_empty(self, items, config):
        assert SequenceDiffer(config).diff(items, list(items)) == []


# ---------------------------------------------------------------------------
# 4. Ordering
# ---------------------------------------------------------------------------


class TestOrdering:

    @given(old=_rows_st, new=_rows_st, config=_config_st)
    def test_grouped_and_ascending(self, old, new, config):
        changes = SequenceDiffer(config).diff(old, new)
        rank = {kind: pos for pos, kind in enumerate(ChangeType)}
        keys = [
            (rank[c.kind], c.new_index if isinstance(c, Move) else c.index)
            for c in changes
        ]
        assert keys == sorted(keys)


# ---------------------------------------------------------------------------
# 5. Symmetry
# ---------------------------------------------------------------------------


class TestSymmetry:

    @given(old=_keys_st, new=_keys_st)
    def test_reverse_diff_swaps_inserts_and_deletes(self, old, new):
        differ = SequenceDiffer()
        forward = differ.diff(old, new)
        backward = differ.diff(new, old)

        fwd_deleted = sorted(c.item for c in forward if isinstance(c, Delete))
        fwd_inserted = sorted(c.item for c in forward if isinstance(c, Insert))
        bwd_deleted = sorted(c.item for c in backward if isinstance(c, Delete))
        bwd_inserted = sorted(c.item for c in backward if isinstance(c, Insert))

        assert fwd_deleted == bwd_inserted
        assert fwd_inserted == bwd_deleted
        fwd_moves = sum(isinstance(c, Move) for c in forward)
        bwd_moves = sum(isinstance(c, Move) for c in backward)
        assert fwd_moves == bwd_moves


# ---------------------------------------------------------------------------
# 6. Move awareness and strategy agreement
# ---------------------------------------------------------------------------


class TestMoveAwareness:

    @given(items=st.lists(st.integers(), unique=True, max_size=30), data=st.data())
    def test_permutation_has_only_moves(self, items, data):
        permuted = data.draw(st.permutations(items))
        changes = SequenceDiffer().diff(items, permuted)
        assert all(c.kind == ChangeType.MOVE for c in changes)

    @given(old=_keys_st, new=_keys_st)
    @settings(max_examples=50)
    def test_strategies_agree_on_script_size(self, old, new):
        lis = SequenceDiffer(DiffConfig(strategy="lis")).diff(old, new)
        lcs = SequenceDiffer(DiffConfig(strategy="lcs")).diff(old, new)
        assert Counter(c.kind for c in lis) == Counter(c.kind for c in lcs)

    @given(old=_keys_st, new=_keys_st)
    def test_no_delete_insert_pair_for_shared_identity_when_moves_on(self, old, new):
        changes = SequenceDiffer().diff(old, new)
        deleted = {c.item for c in changes if isinstance(c, Delete)}
        inserted = {c.item for c in changes if isinstance(c, Insert)}
        assert not deleted & inserted
