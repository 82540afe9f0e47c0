"""Public data models for seqdiff.

A change script is a list of :data:`Change` values.  Each variant is a
frozen dataclass with exactly one payload shape, tagged by its ``kind``
class attribute so consumers can dispatch with either ``isinstance`` or
``change.kind``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ChangeType(str, Enum):
    """Operation types emitted by the differ, in output order."""

    DELETE = "delete"
    """Element present only in the old sequence."""

    INSERT = "insert"
    """Element present only in the new sequence."""

    REPLACE = "replace"
    """Identity matched but content differs."""

    MOVE = "move"
    """Identity matched, content equal, relative order changed."""


# ---------------------------------------------------------------------------
# Change variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Insert(Generic[T]):
    """Insert *item* at *index* of the new sequence.

    Attributes
    ----------
    item:
        The element from the new sequence.
    index:
        Its position in the new sequence.
    """

    kind: ClassVar[ChangeType] = ChangeType.INSERT

    item: T
    index: int

    def as_dict(self) -> dict[str, Any]:
        return {"op_type": self.kind.value, "index": self.index, "item": self.item}


@dataclass(frozen=True)
class Delete(Generic[T]):
    """Delete *item* found at *index* of the old sequence.

    Attributes
    ----------
    item:
        The element from the old sequence.
    index:
        Its position in the old sequence.
    """

    kind: ClassVar[ChangeType] = ChangeType.DELETE

    item: T
    index: int

    def as_dict(self) -> dict[str, Any]:
        return {"op_type": self.kind.value, "index": self.index, "item": self.item}


@dataclass(frozen=True)
class Replace(Generic[T]):
    """Replace a matched element whose content changed.

    Both positions are recorded.  Content takes precedence over position:
    when the element was also reordered no separate ``Move`` is emitted,
    and :attr:`moved` is set instead.

    Attributes
    ----------
    old_item:
        The element as it appears in the old sequence.
    new_item:
        The element as it appears in the new sequence.
    old_index:
        Position in the old sequence.
    new_index:
        Position in the new sequence.
    moved:
        True when the pair is not an anchor, i.e. the element left its
        relative position as well as changing.  A shift caused only by
        inserts or deletes around it leaves this False.
    """

    kind: ClassVar[ChangeType] = ChangeType.REPLACE

    old_item: T
    new_item: T
    old_index: int
    new_index: int
    moved: bool = False

    @property
    def item(self) -> T:
        return self.new_item

    @property
    def index(self) -> int:
        return self.new_index

    def as_dict(self) -> dict[str, Any]:
        return {
            "op_type": self.kind.value,
            "old_index": self.old_index,
            "new_index": self.new_index,
            "moved": self.moved,
            "old_item": self.old_item,
            "new_item": self.new_item,
        }


@dataclass(frozen=True)
class Move(Generic[T]):
    """Move an unchanged element from *old_index* to *new_index*.

    Indices are raw positions in the old and new sequences, not adjusted
    for deletes or inserts applied before the move.

    Attributes
    ----------
    item:
        The element (from the new sequence; its content equals the old one).
    old_index:
        Position in the old sequence.
    new_index:
        Position in the new sequence.
    """

    kind: ClassVar[ChangeType] = ChangeType.MOVE

    item: T
    old_index: int
    new_index: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "op_type": self.kind.value,
            "old_index": self.old_index,
            "new_index": self.new_index,
            "item": self.item,
        }


Change = Union[Insert[T], Delete[T], Replace[T], Move[T]]
"""Any single operation of a change script."""


# ---------------------------------------------------------------------------
# Grouped view for consumers
# ---------------------------------------------------------------------------

@dataclass
class ChangeSet:
    """Index-only view of a change script, grouped by operation type.

    Consumers that mutate a live collection apply :attr:`deletes`,
    :attr:`inserts` and :attr:`moves` inside one atomic batch, then
    :attr:`replaces` after the batch has completed.

    Attributes
    ----------
    deletes:
        Old indices to remove.
    inserts:
        New indices to fill.
    replaces:
        New indices whose content must be refreshed, in post-batch
        coordinates.
    moves:
        ``(old_index, new_index)`` pairs, including elements that were
        moved and changed.  Those also appear in :attr:`replaces`.
    """

    deletes: list[int] = field(default_factory=list)
    inserts: list[int] = field(default_factory=list)
    replaces: list[int] = field(default_factory=list)
    moves: list[tuple[int, int]] = field(default_factory=list)

    @property
    def has_structural(self) -> bool:
        """True when there is anything to apply inside the batch."""
        return bool(self.deletes or self.inserts or self.moves)

    @property
    def has_replaces(self) -> bool:
        return bool(self.replaces)

    @property
    def is_empty(self) -> bool:
        return not (self.has_structural or self.has_replaces)
