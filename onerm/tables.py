from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from .config import display_precision, training_max_pct
from .formulas import Formula, estimate_1rm, estimate_1rm_all, predict_reps_all
from .logger import log_function_call
from .models import MAX_REPS, KnownMax, LiftSet
from .utils import FORMULAS, round_or_nan, training_max

ESTIMATE_COLUMNS = ["formula", "one_rm", "training_max"]
PREDICTION_COLUMNS = ["formula", "reps"]


def _precision(precision: Optional[int]) -> int:
    return display_precision() if precision is None else precision


@log_function_call
def estimate_table(weight: float, reps: float, precision: Optional[int] = None) -> pd.DataFrame:
    """Side-by-side 1RM estimates, one row per formula plus the default policy.

    Raises pydantic.ValidationError for a non-positive weight, negative reps,
    or reps at or above the point where Brzycki's denominator vanishes (about 36.97).
    """
    s = LiftSet(weight=weight, reps=reps)
    p = _precision(precision)
    pct = training_max_pct()

    estimates = estimate_1rm_all(s.weight, s.reps)
    rows = []
    for formula in FORMULAS:
        orm = estimates[formula]
        rows.append({
            "formula": formula.value,
            "one_rm": round_or_nan(orm, p),
            "training_max": training_max(orm, pct, p),
        })
    default = estimate_1rm(s.weight, s.reps, Formula.DEFAULT)
    rows.append({
        "formula": Formula.DEFAULT.value,
        "one_rm": round_or_nan(default, p),
        "training_max": training_max(default, pct, p),
    })
    return pd.DataFrame(rows, columns=ESTIMATE_COLUMNS)


@log_function_call
def rep_prediction_table(rm1: float, weight: float, precision: Optional[int] = None) -> pd.DataFrame:
    """Predicted reps at ``weight`` for a known 1RM, one row per formula."""
    k = KnownMax(rm1=rm1, weight=weight)
    p = _precision(precision)
    predictions = predict_reps_all(k.rm1, k.weight)
    rows = [
        {"formula": formula.value, "reps": round_or_nan(predictions[formula], p)}
        for formula in FORMULAS
    ]
    return pd.DataFrame(rows, columns=PREDICTION_COLUMNS)


@log_function_call
def rep_max_table(one_rm: float, max_reps: int = 12, precision: Optional[int] = None) -> pd.DataFrame:
    """Weight liftable for 1..max_reps reps given a 1RM, one column per formula.

    Every formula is linear in weight, so the weight for ``r`` reps is
    ``one_rm / estimate(1, r)``.
    """
    if not 1 <= max_reps < MAX_REPS:
        raise ValueError(f"max_reps must be between 1 and {int(MAX_REPS)}, got {max_reps}")
    LiftSet(weight=one_rm, reps=max_reps)
    p = _precision(precision)

    reps = np.arange(1, max_reps + 1, dtype=float)
    df = pd.DataFrame({"reps": reps.astype(int)})
    for formula in FORMULAS:
        factor = estimate_1rm(1.0, reps, formula)
        df[formula.value] = np.round(one_rm / factor, p)
    return df
