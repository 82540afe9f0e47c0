"""Error hierarchy for seqdiff.

Diffing itself is total over well-formed input; errors are raised only when
an element cannot supply a usable identity, or when a consumer asks
:func:`~seqdiff.engine.apply.apply_changes` to apply a malformed script.
Every error carries a machine-readable ``code`` (from :class:`ErrorCode`),
a human-readable ``message``, an optional structured ``context`` dict and
an optional chained ``cause``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes for every error seqdiff can raise."""

    IDENTITY_ERROR = "IDENTITY_ERROR"
    APPLY_ERROR = "APPLY_ERROR"


class SeqDiffError(Exception):
    """Base exception for all seqdiff errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string).
    message:
        A developer-friendly description of what went wrong.
    context:
        Structured diagnostic detail.  Keys are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


class SeqDiffIdentityError(SeqDiffError):
    """An element's identity could not be used as a mapping key.

    Context keys: ``side`` (``"old"`` or ``"new"``), ``index``, ``type``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.IDENTITY_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class SeqDiffApplyError(SeqDiffError):
    """A change script does not fit the sequence it is applied to.

    Context keys: ``kind``, ``index``, ``length``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.APPLY_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
