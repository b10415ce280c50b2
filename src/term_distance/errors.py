"""Error kinds raised by term-distance."""

from __future__ import annotations

__all__ = ["InvalidCostModel"]


class InvalidCostModel(ValueError):
    """Raised when a cost assignment cannot be used by the engine.

    The single-pass algorithm relies on ``2 * swap >= insert + delete`` so that
    no symbol ever takes part in two swaps on an optimal path.  Costs violating
    that inequality (or negative costs) are rejected at construction time.
    """
