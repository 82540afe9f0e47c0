"""Element matching and anchor selection.

Matching pairs every new element with the earliest unconsumed old element
of the same identity.  Anchor selection then picks the largest subset of
those pairs that kept their relative order; every other pair has moved.
Two anchor strategies are available:

* :func:`lis_anchors` -- longest increasing subsequence, O(n log n).
* :func:`lcs_anchors` -- dynamic-programming LCS, O(n * m).  Kept for
  small inputs and as a reference for the faster strategy.
"""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Hashable, Sequence


def match_occurrences(
    old_ids: Sequence[Hashable],
    new_ids: Sequence[Hashable],
) -> list[tuple[int, int]]:
    """Pair old and new positions that share an identity.

    The k-th occurrence of an identity in *old_ids* pairs with its k-th
    occurrence in *new_ids*.  Surplus occurrences on either side stay
    unmatched.

    Parameters
    ----------
    old_ids:
        Identities of the old sequence, in order.
    new_ids:
        Identities of the new sequence, in order.

    Returns
    -------
    list[tuple[int, int]]
        ``(old_idx, new_idx)`` pairs sorted by ``new_idx``.
    """
    positions: dict[Hashable, deque[int]] = {}
    for i, ident in enumerate(old_ids):
        positions.setdefault(ident, deque()).append(i)

    pairs: list[tuple[int, int]] = []
    for j, ident in enumerate(new_ids):
        queue = positions.get(ident)
        if queue:
            pairs.append((queue.popleft(), j))
    return pairs


def lis_anchors(pairs: Sequence[tuple[int, int]]) -> set[int]:
    """Select anchors with a longest increasing subsequence.

    *pairs* must be sorted by new index.  The returned pairs form the
    longest run whose old indices also increase.  Ties between equally
    long runs are broken by input order alone, so the same input always
    yields the same anchors.

    Returns
    -------
    set[int]
        Positions (into *pairs*) of the anchor pairs.
    """
    # tails[k] is the smallest old index ending an increasing run of
    # length k + 1; tail_at[k] is the position of that pair.
    tails: list[int] = []
    tail_at: list[int] = []
    prev: list[int] = [-1] * len(pairs)

    for pos, (old_idx, _) in enumerate(pairs):
        k = bisect_left(tails, old_idx)
        if k > 0:
            prev[pos] = tail_at[k - 1]
        if k == len(tails):
            tails.append(old_idx)
            tail_at.append(pos)
        else:
            tails[k] = old_idx
            tail_at[k] = pos

    anchors: set[int] = set()
    pos = tail_at[-1] if tail_at else -1
    while pos >= 0:
        anchors.add(pos)
        pos = prev[pos]
    return anchors


def lcs_match(
    old_keys: Sequence[Hashable],
    new_keys: Sequence[Hashable],
) -> list[tuple[int, int]]:
    """Compute LCS matched pairs between two key sequences.

    Uses the standard dynamic-programming table, so time and memory are
    O(len(old_keys) * len(new_keys)).

    Returns
    -------
    list[tuple[int, int]]
        ``(old_idx, new_idx)`` pairs of one longest common subsequence,
        in order.
    """
    m = len(old_keys)
    n = len(new_keys)

    if m == 0 or n == 0:
        return []

    # dp[i][j] stores the length of the LCS of old_keys[:i] and new_keys[:j].
    dp: list[list[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if old_keys[i - 1] == new_keys[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

    pairs: list[tuple[int, int]] = []
    i, j = m, n
    while i > 0 and j > 0:
        if old_keys[i - 1] == new_keys[j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    pairs.reverse()
    return pairs


def _tag_occurrences(ids: Sequence[Hashable]) -> list[tuple[Hashable, int]]:
    """Tag each identity with its occurrence rank, making every key unique."""
    seen: dict[Hashable, int] = {}
    tagged: list[tuple[Hashable, int]] = []
    for ident in ids:
        rank = seen.get(ident, 0)
        seen[ident] = rank + 1
        tagged.append((ident, rank))
    return tagged


def lcs_anchors(
    old_ids: Sequence[Hashable],
    new_ids: Sequence[Hashable],
    pairs: Sequence[tuple[int, int]],
) -> set[int]:
    """Select anchors with an LCS over occurrence-tagged identities.

    Tagging makes the LCS agree with :func:`match_occurrences`: two tagged
    keys are equal exactly when their positions form a matched pair, so
    every LCS pair is one of *pairs*.

    Returns
    -------
    set[int]
        Positions (into *pairs*) of the anchor pairs.
    """
    common = lcs_match(_tag_occurrences(old_ids), _tag_occurrences(new_ids))
    position_of = {pair: pos for pos, pair in enumerate(pairs)}
    return {position_of[pair] for pair in common}
