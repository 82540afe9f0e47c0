"""Diff engine for ordered sequences.

Exports
-------
SequenceDiffer
    Computes move-aware change scripts between two sequences.
diff
    One-shot shorthand for ``SequenceDiffer(config).diff(...)``.
DiffAware
    Structural protocol for elements with their own identity and content
    comparison.
apply_changes
    Replay a change script against a list.
group_changes
    Split a change script into per-type index lists.
"""

from .apply import apply_changes, group_changes
from .differ import SequenceDiffer, diff
from .identity import DiffAware

__all__ = [
    "DiffAware",
    "SequenceDiffer",
    "apply_changes",
    "diff",
    "group_changes",
]
