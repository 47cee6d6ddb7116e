from __future__ import annotations

import math
from typing import Tuple

from .formulas import VERSION, Formula

# Named formulas in display order; the default policy is not a formula of its own.
FORMULAS: Tuple[Formula, ...] = (
    Formula.EPLEY,
    Formula.BRZYCKI,
    Formula.LOMBARDI,
    Formula.MAYHEW,
    Formula.WATHAN,
)

__all__ = ["FORMULAS", "VERSION", "round_or_nan", "training_max"]


def round_or_nan(value: float, precision: int = 1) -> float:
    """Round ``value``; NaN and infinities pass through unchanged."""
    v = float(value)
    if math.isnan(v) or math.isinf(v):
        return v
    return round(v, precision)


def training_max(one_rm: float, pct: float = 0.9, precision: int = 1) -> float:
    """Return a training max as a fraction of a 1RM.

    training_max = one_rm * pct
    Rounded to ``precision`` decimal places; NaN propagates.
    """
    orm = float(one_rm)
    if math.isnan(orm):
        return orm
    return round_or_nan(orm * pct, precision)
