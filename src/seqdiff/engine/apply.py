"""Helpers for consumers of a change script.

:func:`group_changes` splits a script into index lists, the shape a
collection widget wants: structural operations (deletes, inserts, moves)
go into one atomic batch, content refreshes (replaces) run after it.

:func:`apply_changes` replays a script against a plain list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from seqdiff.errors import SeqDiffApplyError
from seqdiff.models import Change, ChangeSet, Delete, Insert, Move, Replace


def group_changes(changes: Iterable[Change]) -> ChangeSet:
    """Group a change script into index lists by operation type.

    Parameters
    ----------
    changes:
        A change script, typically from :meth:`SequenceDiffer.diff`.

    Returns
    -------
    ChangeSet
        Deletes carry old indices, inserts and replaces new indices, and
        moves ``(old_index, new_index)`` pairs.  A :class:`Replace` whose
        ``moved`` flag is set is listed under both ``moves`` and
        ``replaces``: the batch relocates it, the refresh updates it.
        Each list keeps the order of *changes*.
    """
    grouped = ChangeSet()
    for change in changes:
        if isinstance(change, Delete):
            grouped.deletes.append(change.index)
        elif isinstance(change, Insert):
            grouped.inserts.append(change.index)
        elif isinstance(change, Replace):
            if change.moved:
                grouped.moves.append((change.old_index, change.new_index))
            grouped.replaces.append(change.new_index)
        elif isinstance(change, Move):
            grouped.moves.append((change.old_index, change.new_index))
    return grouped


def apply_changes(old: Sequence[Any], changes: Iterable[Change]) -> list[Any]:
    """Apply a change script to a copy of *old*.

    Every position a delete, move or replace takes an element from is
    removed in descending order.  Every insert, move or replace element is
    then placed at its new index in ascending order.  For a script
    produced by the differ the result equals the new sequence.

    Parameters
    ----------
    old:
        The sequence the script was computed from.
    changes:
        The change script.

    Returns
    -------
    list
        A new list; *old* is not modified.

    Raises
    ------
    SeqDiffApplyError
        If an index is out of range, or the same old index is removed or
        the same new index filled more than once.
    """
    removals: dict[int, str] = {}
    placements: dict[int, tuple[str, Any]] = {}

    for change in changes:
        kind = change.kind.value
        if isinstance(change, Delete):
            _claim(removals, change.index, kind, kind, "removed")
        elif isinstance(change, Insert):
            _claim(placements, change.index, (kind, change.item), kind, "filled")
        elif isinstance(change, (Move, Replace)):
            _claim(removals, change.old_index, kind, kind, "removed")
            _claim(placements, change.new_index, (kind, change.item), kind, "filled")

    result = list(old)
    for index in sorted(removals, reverse=True):
        if index < 0 or index >= len(result):
            raise SeqDiffApplyError(
                message=f"{removals[index]} index {index} out of range for length {len(result)}",
                context={"kind": removals[index], "index": index, "length": len(result)},
            )
        del result[index]

    for index in sorted(placements):
        kind, item = placements[index]
        if index < 0 or index > len(result):
            raise SeqDiffApplyError(
                message=f"{kind} index {index} out of range for length {len(result)}",
                context={"kind": kind, "index": index, "length": len(result)},
            )
        result.insert(index, item)

    return result


def _claim(slots: dict[int, Any], index: int, value: Any, kind: str, verb: str) -> None:
    if index in slots:
        raise SeqDiffApplyError(
            message=f"{kind} index {index} already {verb} by another change",
            context={"kind": kind, "index": index},
        )
    slots[index] = value
