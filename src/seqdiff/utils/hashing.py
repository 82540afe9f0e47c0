"""MD5 helpers for value identities.

Mappings and lists cannot be dictionary keys, so the differ identifies them
by a digest of their canonical JSON form.  These hashes are **not** used for
security purposes.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def md5_hash(data: str) -> str:
    """Return the hex-encoded MD5 digest of *data*.

    The string is encoded as UTF-8 before hashing.

    Examples
    --------
    >>> md5_hash("hello")
    '5d41402abc4b2a76b9719d911017c592'
    """
    return hashlib.md5(data.encode("utf-8")).hexdigest()


def hash_value(value: Any) -> str:
    """Return the hex-encoded MD5 of a JSON-serialised value.

    Serialisation uses **sorted keys** and ``ensure_ascii=False`` so that
    two mappings with the same items hash identically regardless of
    insertion order.  Objects JSON cannot encode are rendered with
    :func:`repr`.

    Parameters
    ----------
    value:
        A mapping, list, or any JSON-compatible value.

    Returns
    -------
    str
        A 32-character lowercase hexadecimal string.

    Examples
    --------
    >>> hash_value({"b": 2, "a": 1}) == hash_value({"a": 1, "b": 2})
    True
    """
    return md5_hash(json.dumps(value, sort_keys=True, ensure_ascii=False, default=repr))
