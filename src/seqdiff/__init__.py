"""seqdiff: move-aware diffing of ordered sequences.

Public re-exports
-----------------

* **Diffing:** :func:`diff`, :class:`SequenceDiffer`, :class:`DiffAware`
* **Consumers:** :func:`apply_changes`, :func:`group_changes`
* **Configuration:** :class:`DiffConfig`
* **Errors:** Every :class:`SeqDiffError` subclass and :class:`ErrorCode`
* **Models:** :class:`ChangeType`, the change variants and :class:`ChangeSet`

Usage::

    from seqdiff import apply_changes, diff

    old = ["a", "b", "c"]
    new = ["b", "c", "a", "d"]
    changes = diff(old, new)
    assert apply_changes(old, changes) == new
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from seqdiff.config import DEFAULT_LCS_MAX_CELLS, DiffConfig

# ── Diffing ─────────────────────────────────────────────────────────────
from seqdiff.engine import (
    DiffAware,
    SequenceDiffer,
    apply_changes,
    diff,
    group_changes,
)

# ── Errors ──────────────────────────────────────────────────────────────
from seqdiff.errors import (
    ErrorCode,
    SeqDiffApplyError,
    SeqDiffError,
    SeqDiffIdentityError,
)

# ── Models ──────────────────────────────────────────────────────────────
from seqdiff.models import (
    Change,
    ChangeSet,
    ChangeType,
    Delete,
    Insert,
    Move,
    Replace,
)

__version__ = "0.1.0"

__all__ = [
    # Diffing
    "diff",
    "SequenceDiffer",
    "DiffAware",
    "apply_changes",
    "group_changes",
    # Configuration
    "DiffConfig",
    "DEFAULT_LCS_MAX_CELLS",
    # Errors
    "SeqDiffError",
    "SeqDiffIdentityError",
    "SeqDiffApplyError",
    "ErrorCode",
    # Models
    "Change",
    "ChangeSet",
    "ChangeType",
    "Delete",
    "Insert",
    "Move",
    "Replace",
]
