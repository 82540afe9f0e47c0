"""Metrics hook protocol and no-op default implementation.

The differ emits counters, a timing and a gauge for every call.  By default a
:class:`NoopMetricsHook` is used so there is zero overhead; supply any
object satisfying :class:`MetricsHook` via ``DiffConfig(metrics=...)`` to
route the data points to StatsD, Prometheus or similar.

Emitted metric names:

* ``seqdiff.diffs_total``         -- counter, tag ``strategy``
* ``seqdiff.diff_ops_total``      -- counter, tag ``op_type``
* ``seqdiff.diff_duration_ms``    -- timing
* ``seqdiff.diff_script_size``    -- gauge, number of changes in the last
  script, tag ``strategy``
* ``seqdiff.lcs_fallback_total``  -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict of string keys and values.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics implementation that silently discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
