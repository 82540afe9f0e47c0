"""Identity and content-equality resolution for diffed elements.

An element takes part in a diff through two capabilities: a stable,
hashable identity that pairs "the same logical item" across both
sequences, and a content comparison deciding whether a matched pair is
unchanged.  Callers provide them explicitly (``key=`` / ``content_eq=``),
through the :class:`DiffAware` protocol, or implicitly through value
semantics.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Callable, Protocol, runtime_checkable

from seqdiff.errors import SeqDiffIdentityError
from seqdiff.utils.hashing import hash_value

KeyFunc = Callable[[Any], Hashable]
ContentEq = Callable[[Any, Any], bool]


@runtime_checkable
class DiffAware(Protocol):
    """Structural protocol for elements that know how to be diffed.

    No inheritance is needed: any object exposing ``diff_id`` and
    ``compare_content`` satisfies it.  ``compare_content`` must be
    deterministic and symmetric; the differ does not check this.
    """

    @property
    def diff_id(self) -> Hashable:
        """Stable identity, equal for the same logical item."""
        ...

    def compare_content(self, other: Any) -> bool:
        """Return ``True`` when *other* has the same content."""
        ...


def default_identity(item: Any) -> Hashable:
    """Return the identity of *item* under value semantics.

    ``DiffAware`` elements report their own ``diff_id``.  Mappings and
    lists are identified by a digest of their canonical JSON form, so two
    equal dicts share an identity.  Anything else is its own identity.
    """
    if isinstance(item, DiffAware):
        return item.diff_id
    if isinstance(item, (Mapping, list)):
        return hash_value(item)
    return item


def default_content_eq(a: Any, b: Any) -> bool:
    if isinstance(a, DiffAware):
        return a.compare_content(b)
    return a == b


def compute_identities(items: list[Any], key: KeyFunc, side: str) -> list[Hashable]:
    """Compute the identity of every element and check it is hashable.

    Raises
    ------
    SeqDiffIdentityError
        If an identity cannot be hashed.
    """
    identities: list[Hashable] = []
    for index, item in enumerate(items):
        ident = key(item)
        try:
            hash(ident)
        except TypeError as exc:
            raise SeqDiffIdentityError(
                message=f"Identity of {side}[{index}] is not hashable: {type(ident).__name__}",
                context={"side": side, "index": index, "type": type(ident).__name__},
                cause=exc,
            ) from exc
        identities.append(ident)
    return identities
