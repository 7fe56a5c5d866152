"""Rounding helpers for set counts and loads."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which would make landmark and set-count rounding depend on parity.
    """
    return int(math.floor(value + 0.5))
