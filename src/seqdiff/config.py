"""Configuration for seqdiff.

:class:`DiffConfig` captures every tuneable knob of
:class:`~seqdiff.engine.differ.SequenceDiffer`.  All fields have defaults, so
``DiffConfig()`` is a complete configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

DEFAULT_LCS_MAX_CELLS: int = 4_000_000
"""Largest ``len(old) * len(new)`` the ``"lcs"`` strategy will tabulate."""


@dataclass
class DiffConfig:
    """Complete configuration for a sequence differ.

    Parameters
    ----------
    strategy:
        How matched elements that kept their relative order are chosen.

        * ``"lis"`` -- longest increasing subsequence, O(n log n).
        * ``"lcs"`` -- dynamic-programming LCS, O(n * m).  Falls back to
          ``"lis"`` above ``lcs_max_cells``.
    detect_moves:
        Report reordered elements as ``Move``.  When ``False`` they are
        reported as a ``Delete`` of the old element plus an ``Insert`` of
        the new one.
    lcs_max_cells:
        Upper bound on the LCS table size (``len(old) * len(new)``).
    metrics:
        Optional :class:`~seqdiff.observability.MetricsHook`.
    debug_dump_diff:
        Write every computed change script as JSON to *stderr*.
    """

    strategy: Literal["lis", "lcs"] = "lis"

    detect_moves: bool = True

    lcs_max_cells: int = DEFAULT_LCS_MAX_CELLS

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.strategy not in ("lis", "lcs"):
            raise ValueError(f"strategy must be 'lis' or 'lcs', got {self.strategy!r}")
        if self.lcs_max_cells <= 0:
            raise ValueError(f"lcs_max_cells must be > 0, got {self.lcs_max_cells}")
