"""Sequence differ: compute a move-aware change script between two lists.

Given an *old* and a *new* sequence, the differ pairs elements by identity,
decides which pairs kept their relative order, and reports everything else
as :class:`~seqdiff.models.Delete`, :class:`~seqdiff.models.Insert`,
:class:`~seqdiff.models.Replace` or :class:`~seqdiff.models.Move`.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from collections import Counter
from collections.abc import Sequence
from typing import Any

from seqdiff.config import DiffConfig
from seqdiff.models import Change, ChangeType, Delete, Insert, Move, Replace
from seqdiff.observability import NoopMetricsHook, get_logger

from .identity import (
    ContentEq,
    KeyFunc,
    compute_identities,
    default_content_eq,
    default_identity,
)
from .matcher import lcs_anchors, lis_anchors, match_occurrences

log = get_logger("seqdiff.differ")

_GROUP_ORDER: dict[ChangeType, int] = {kind: rank for rank, kind in enumerate(ChangeType)}


class SequenceDiffer:
    """Computes change scripts between ordered sequences.

    The differ is stateless between calls and safe to share across
    threads.  The same instance diffs sections and rows alike; only the
    element type differs.

    Parameters
    ----------
    config:
        Differ configuration.  Defaults to ``DiffConfig()``.
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    @property
    def config(self) -> DiffConfig:
        return self._config

    def diff(
        self,
        old: Sequence[Any],
        new: Sequence[Any],
        *,
        key: KeyFunc | None = None,
        content_eq: ContentEq | None = None,
    ) -> list[Change]:
        """Compute the change script transforming *old* into *new*.

        Output is grouped deletes, inserts, replaces, moves.  Deletes are
        ordered by old index; the other groups by new index.  Applying the
        script with :func:`~seqdiff.engine.apply.apply_changes` reproduces
        *new* exactly.

        Parameters
        ----------
        old:
            The previous state.
        new:
            The desired state.
        key:
            Identity function.  Defaults to ``diff_id`` for
            :class:`~seqdiff.engine.identity.DiffAware` elements and value
            identity otherwise.
        content_eq:
            Content comparison for matched pairs.  Defaults to
            ``compare_content`` for ``DiffAware`` elements and ``==``
            otherwise.

        Returns
        -------
        list[Change]
            A fresh list; empty when the sequences are equivalent.

        Raises
        ------
        SeqDiffIdentityError
            If an element's identity is not hashable.
        """
        t0 = time.monotonic()
        old = list(old)
        new = list(new)
        strategy = self._config.strategy

        if not old and not new:
            changes: list[Change] = []
        elif not old:
            changes = [Insert(item, j) for j, item in enumerate(new)]
        elif not new:
            changes = [Delete(item, i) for i, item in enumerate(old)]
        else:
            identify = key if key is not None else default_identity
            same_content = content_eq if content_eq is not None else default_content_eq
            old_ids = compute_identities(old, identify, "old")
            new_ids = compute_identities(new, identify, "new")
            pairs = match_occurrences(old_ids, new_ids)
            strategy = self._resolve_strategy(len(old), len(new))
            if strategy == "lcs":
                anchors = lcs_anchors(old_ids, new_ids, pairs)
            else:
                anchors = lis_anchors(pairs)
            changes = self._build_changes(old, new, pairs, anchors, same_content)

        elapsed_ms = (time.monotonic() - t0) * 1000
        self._report(old, new, changes, strategy, elapsed_ms)
        return changes

    def _resolve_strategy(self, old_len: int, new_len: int) -> str:
        """Return the anchor strategy to use for inputs of this size."""
        if self._config.strategy != "lcs":
            return "lis"
        cells = old_len * new_len
        if cells <= self._config.lcs_max_cells:
            return "lcs"
        self._metrics.increment("seqdiff.lcs_fallback_total")
        log.warning(
            "LCS table too large, using LIS",
            extra={
                "extra_fields": {
                    "op": "diff",
                    "cells": cells,
                    "lcs_max_cells": self._config.lcs_max_cells,
                }
            },
        )
        return "lis"

    def _build_changes(
        self,
        old: list[Any],
        new: list[Any],
        pairs: list[tuple[int, int]],
        anchors: set[int],
        same_content: ContentEq,
    ) -> list[Change]:
        """Classify matched pairs and leftovers, then order the script."""
        changes: list[Change] = []
        matched_old = [False] * len(old)
        matched_new = [False] * len(new)

        for pos, (i, j) in enumerate(pairs):
            matched_old[i] = True
            matched_new[j] = True
            if not same_content(old[i], new[j]):
                changes.append(Replace(old[i], new[j], i, j, moved=pos not in anchors))
            elif pos in anchors:
                continue
            elif self._config.detect_moves:
                changes.append(Move(new[j], i, j))
            else:
                changes.append(Delete(old[i], i))
                changes.append(Insert(new[j], j))

        changes.extend(Delete(item, i) for i, item in enumerate(old) if not matched_old[i])
        changes.extend(Insert(item, j) for j, item in enumerate(new) if not matched_new[j])
        changes.sort(key=_sort_key)
        return changes

    def _report(
        self,
        old: list[Any],
        new: list[Any],
        changes: list[Change],
        strategy: str,
        elapsed_ms: float,
    ) -> None:
        """Emit metrics, the debug log line and the optional debug dump."""
        op_counts: Counter[str] = Counter(change.kind.value for change in changes)

        self._metrics.increment("seqdiff.diffs_total", tags={"strategy": strategy})
        for op_type_val, count in op_counts.items():
            self._metrics.increment(
                "seqdiff.diff_ops_total", count, tags={"op_type": op_type_val},
            )
        self._metrics.timing(
            "seqdiff.diff_duration_ms", elapsed_ms, tags={"strategy": strategy},
        )
        self._metrics.gauge(
            "seqdiff.diff_script_size", len(changes), tags={"strategy": strategy},
        )

        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "diff computed",
                extra={
                    "extra_fields": {
                        "op": "diff",
                        "strategy": strategy,
                        "old_size": len(old),
                        "new_size": len(new),
                        "duration_ms": round(elapsed_ms, 3),
                        **op_counts,
                    }
                },
            )

        if self._config.debug_dump_diff:
            dump = {
                "old_size": len(old),
                "new_size": len(new),
                "changes": [change.as_dict() for change in changes],
            }
            print(json.dumps(dump, indent=2, default=str), file=sys.stderr)


def _sort_key(change: Change) -> tuple[int, int]:
    if isinstance(change, Move):
        return _GROUP_ORDER[change.kind], change.new_index
    return _GROUP_ORDER[change.kind], change.index


def diff(
    old: Sequence[Any],
    new: Sequence[Any],
    *,
    key: KeyFunc | None = None,
    content_eq: ContentEq | None = None,
    config: DiffConfig | None = None,
) -> list[Change]:
    """Compute the change script transforming *old* into *new*.

    Shorthand for ``SequenceDiffer(config).diff(old, new, ...)``.

    Examples
    --------
    >>> [c.as_dict() for c in diff(["a", "b", "c"], ["b", "c", "a"])]
    [{'op_type': 'move', 'old_index': 0, 'new_index': 2, 'item': 'a'}]
    """
    return SequenceDiffer(config).diff(old, new, key=key, content_eq=content_eq)
