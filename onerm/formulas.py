from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

from .logger import logger

VERSION = "1.0.1"


class Formula(str, Enum):
    """Named 1RM regression formulas.

    - EPLEY: most accurate between 1 and 10 reps
    - BRZYCKI: commonly used between 1 and 5 reps
    - LOMBARDI: typically used for higher rep ranges (10+)
    - MAYHEW: derived from a bench press study
    - WATHAN: a more conservative take on Mayhew
    - DEFAULT: pick the most appropriate formula from the rep count
    """

    EPLEY = "Epley"
    BRZYCKI = "Brzycki"
    LOMBARDI = "Lombardi"
    MAYHEW = "Mayhew"
    WATHAN = "Wathan"
    DEFAULT = "Default"

    @classmethod
    def lookup(cls, value: Union["Formula", str, None]) -> Optional["Formula"]:
        """Return the member matching ``value`` or None for an unknown variant."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


FormulaLike = Union[Formula, str]


# Forward estimates: (weight, reps) -> 1RM

def estimate_1rm_epley(weight: float, reps: float) -> float:
    """1RM = weight * (1 + reps / 30)"""
    return weight * (1 + reps / 30)


def estimate_1rm_brzycki(weight: float, reps: float) -> float:
    """1RM = weight / (1.0278 - 0.0278 * reps)

    Not bounded: the denominator crosses zero around 37 reps.
    """
    return weight / (1.0278 - 0.0278 * reps)


def estimate_1rm_lombardi(weight: float, reps: float) -> float:
    """1RM = weight * (1 + reps / 40)"""
    return weight * (1 + reps / 40)


def estimate_1rm_mayhew(weight: float, reps: float) -> float:
    """1RM = weight * (100 / (52.2 + 41.9 * reps / 100))"""
    return weight * (100 / (52.2 + 41.9 * reps / 100))


def estimate_1rm_wathan(weight: float, reps: float) -> float:
    """1RM = weight * (100 / (48.8 + 53.8 * reps / 100))"""
    return weight * (100 / (48.8 + 53.8 * reps / 100))


_ESTIMATORS = {
    Formula.EPLEY: estimate_1rm_epley,
    Formula.BRZYCKI: estimate_1rm_brzycki,
    Formula.LOMBARDI: estimate_1rm_lombardi,
    Formula.MAYHEW: estimate_1rm_mayhew,
    Formula.WATHAN: estimate_1rm_wathan,
}


def estimate_1rm_default(weight: float, reps: float) -> float:
    """Estimate 1RM with the formula best suited to the rep count.

    - reps <= 1: the weight itself
    - up to 5 reps: Brzycki
    - up to 10 reps: Epley
    - above 10 reps: Wathan
    """
    if reps <= 1:
        return weight
    if reps <= 5:
        return estimate_1rm_brzycki(weight, reps)
    if reps <= 10:
        return estimate_1rm_epley(weight, reps)
    return estimate_1rm_wathan(weight, reps)


def estimate_1rm(weight: float, reps: float, formula: FormulaLike = Formula.DEFAULT) -> float:
    """Estimate 1RM using ``formula``.

    ``Formula.DEFAULT`` and unrecognised identifiers use the rep-based
    default selection.
    """
    member = Formula.lookup(formula)
    if member is None:
        logger.debug("Unknown formula %r, using default selection", formula)
    estimator = _ESTIMATORS.get(member)
    if estimator is None:
        return estimate_1rm_default(weight, reps)
    return estimator(weight, reps)


def estimate_1rm_all(weight: float, reps: float) -> Dict[Formula, float]:
    """Estimate 1RM with every named formula (the default policy excluded)."""
    return {formula: estimator(weight, reps) for formula, estimator in _ESTIMATORS.items()}


# Rep predictions: (known 1RM, weight) -> reps
#
# A non-positive 1RM always predicts 0 reps. Zero weight is not guarded.

def predict_reps_epley(rm1: float, weight: float) -> float:
    """reps = 30 * (rm1 / weight - 1)"""
    if rm1 <= 0:
        return 0
    return 30 * (rm1 / weight - 1)


def predict_reps_brzycki(rm1: float, weight: float) -> float:
    """reps = (1.0278 - rm1 / weight) / 0.0278"""
    if rm1 <= 0:
        return 0
    return (1.0278 - rm1 / weight) / 0.0278


def predict_reps_lombardi(rm1: float, weight: float) -> float:
    """reps = 40 * (rm1 / weight - 1)"""
    if rm1 <= 0:
        return 0
    return 40 * (rm1 / weight - 1)


def predict_reps_mayhew(rm1: float, weight: float) -> float:
    """reps = 100 * (52.2 - 100 * weight / rm1) / 41.9"""
    if rm1 <= 0:
        return 0
    return 100 * (52.2 - 100 * weight / rm1) / 41.9


def predict_reps_wathan(rm1: float, weight: float) -> float:
    """reps = 100 * (48.8 - 100 * weight / rm1) / 53.8"""
    if rm1 <= 0:
        return 0
    return 100 * (48.8 - 100 * weight / rm1) / 53.8


_PREDICTORS = {
    Formula.EPLEY: predict_reps_epley,
    Formula.BRZYCKI: predict_reps_brzycki,
    Formula.LOMBARDI: predict_reps_lombardi,
    Formula.MAYHEW: predict_reps_mayhew,
    Formula.WATHAN: predict_reps_wathan,
}


def predict_reps(rm1: float, weight: float, formula: FormulaLike = Formula.EPLEY) -> float:
    """Predict reps at ``weight`` for a known 1RM using ``formula``.

    Unlike ``estimate_1rm`` there is no rep-based selection here:
    ``Formula.DEFAULT`` and unrecognised identifiers fall back to Epley.
    """
    member = Formula.lookup(formula)
    if member is None:
        logger.debug("Unknown formula %r, using Epley", formula)
    predictor = _PREDICTORS.get(member)
    if predictor is None:
        return predict_reps_epley(rm1, weight)
    return predictor(rm1, weight)


def predict_reps_all(rm1: float, weight: float) -> Dict[Formula, float]:
    """Predict reps at ``weight`` with every named formula."""
    return {formula: predictor(rm1, weight) for formula, predictor in _PREDICTORS.items()}
