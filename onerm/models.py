from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

"""Pydantic models for strict input validation.

The formula functions themselves accept anything numeric; these models are
used by the table and chart builders, which reject inputs that would only
produce meaningless rows.
"""

# Brzycki's denominator (1.0278 - 0.0278 * reps) reaches zero here, at about 36.97 reps.
MAX_REPS = 1.0278 / 0.0278


class LiftSet(BaseModel):
    """A submaximal set: weight moved for a number of reps."""

    weight: float = Field(gt=0, description="Weight must be positive")
    reps: float = Field(ge=0, lt=MAX_REPS, description=f"Reps must be at least 0 and below {MAX_REPS:.2f}")

    @field_validator("weight", "reps")
    @classmethod
    def finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Value must be finite")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"weight": 100.0, "reps": 5},
            ]
        }
    )


class KnownMax(BaseModel):
    """A known 1RM and a target weight to predict reps for.

    ``rm1`` is left unconstrained: a non-positive 1RM predicts 0 reps.
    """

    rm1: float
    weight: float = Field(gt=0, description="Weight must be positive")

    @field_validator("rm1", "weight")
    @classmethod
    def finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Value must be finite")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"rm1": 130.0, "weight": 100.0},
            ]
        }
    )
