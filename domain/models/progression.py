"""
Progression configuration and suggestion result types.

A progression call returns either a suggestion or an explicit
:class:`NoSuggestion`. A suggested weight of ``0`` is a valid bodyweight
value and never means "no suggestion".
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Defaults shared with backend.settings
LOOKBACK_WEEKS = 2
DEFAULT_INCREMENT = 5.0


class ProgressionModel(str, Enum):
    """Which progression model produced a suggestion."""

    LINEAR = "linear"
    DOUBLE = "double"
    BAND = "band"


class ProgressionConfig(BaseModel):
    """Immutable thresholds for the weight-based progression models."""

    model_config = ConfigDict(frozen=True)

    lookback_weeks: int = Field(
        default=LOOKBACK_WEEKS,
        ge=1,
        description="Trailing window (weeks) of history considered",
    )
    default_increment: float = Field(
        default=DEFAULT_INCREMENT,
        gt=0,
        description="Weight added on progression",
    )
    weight_resolution: float = Field(
        default=5.0,
        gt=0,
        description="Linear progression rounds to a multiple of this value",
    )
    min_reps: int = Field(default=8, ge=1, description="Double progression reset reps")
    max_reps: int = Field(default=12, ge=1, description="Double progression rollover reps")
    bodyweight_increment: float = Field(
        default=5.0,
        gt=0,
        description="Added weight when a bodyweight exercise rolls over",
    )

    @model_validator(mode="after")
    def validate_rep_range(self) -> "ProgressionConfig":
        """Ensure the double-progression rep range is not inverted."""
        if self.min_reps > self.max_reps:
            raise ValueError(
                f"min_reps ({self.min_reps}) must not exceed max_reps ({self.max_reps})"
            )
        return self


class NoSuggestion(BaseModel):
    """
    Explicit "no suggestion available" result.

    Insufficient or stale history is a normal outcome, so it is modelled as a
    value rather than an exception.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"
    reason: str = Field(..., description="Why no suggestion could be made")


class ProgressionSuggestion(BaseModel):
    """Suggested next session for an exercise."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["suggestion"] = "suggestion"
    model: ProgressionModel
    suggested_weight: float = Field(..., ge=0)
    reps: int = Field(..., gt=0)
    sets: int = Field(..., ge=1)
    band_color: Optional[str] = None
    last_weight: Optional[float] = None
    last_reps: Optional[int] = None
    last_sets: Optional[int] = None
    last_band_color: Optional[str] = None

    @property
    def band_changed(self) -> bool:
        """True when the suggestion moves to a different band."""
        return self.band_color is not None and self.band_color != self.last_band_color


class WeightSuggestion(BaseModel):
    """Suggested working weight projected from a 1RM estimate."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["weight"] = "weight"
    suggested_weight: float = Field(..., ge=0)
    target_reps: int = Field(..., gt=0)
    basis_weight: float = Field(..., ge=0)
    basis_reps: int = Field(..., gt=0)
    one_rep_max: float = Field(..., ge=0)


SuggestionResult = Union[ProgressionSuggestion, NoSuggestion]
WeightSuggestionResult = Union[WeightSuggestion, NoSuggestion]
