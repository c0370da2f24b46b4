"""
Lift log value objects.

Lift logs are produced by the persistence layer from historical records and
are read-only input to the progression engines.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models.exercise import ExerciseId


class LoggedSet(BaseModel):
    """
    A single performed set.

    Examples:
        >>> LoggedSet(weight=100, reps=5)
        >>> LoggedSet(weight=0, reps=12, band_color="blue")
    """

    model_config = ConfigDict(frozen=True)

    weight: float = Field(default=0.0, ge=0, description="Weight lifted (0 for bodyweight/banded)")
    reps: int = Field(..., gt=0, description="Repetitions completed")
    band_color: Optional[str] = Field(default=None, description="Band colour, if banded")

    @field_validator("band_color")
    @classmethod
    def normalize_band_color(cls, v: Optional[str]) -> Optional[str]:
        """Store band colours lowercased; blank means no band."""
        if v is None:
            return None
        v = v.strip().lower()
        return v or None


class LiftLog(BaseModel):
    """
    All sets logged for one exercise at one point in time.

    Examples:
        >>> log = LiftLog(
        ...     id="log-1",
        ...     user_id="user-1",
        ...     exercise_id="bench-press",
        ...     logged_at=datetime(2024, 1, 1, 9, 0),
        ...     sets=[LoggedSet(weight=100, reps=5), LoggedSet(weight=100, reps=5)],
        ... )
        >>> log.set_count
        2
    """

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    exercise_id: ExerciseId
    logged_at: datetime
    sets: List[LoggedSet] = Field(default_factory=list)

    @property
    def set_count(self) -> int:
        """Number of sets in this log."""
        return len(self.sets)

    @property
    def last_set(self) -> Optional[LoggedSet]:
        """The final set performed, or None for an empty log."""
        return self.sets[-1] if self.sets else None

    @property
    def top_set(self) -> Optional[LoggedSet]:
        """Heaviest set, ties broken by most reps."""
        if not self.sets:
            return None
        return max(self.sets, key=lambda s: (s.weight, s.reps))
