"""
Exercise value objects.

- ExerciseProfile: the exercise metadata the progression engines need
- MatchCandidate: an exercise title the name matcher can rank
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.models.band import BandType


ExerciseId = Union[int, str]


class ExerciseScope(str, Enum):
    """Visibility of an exercise: owned by a user, or shared by everyone."""

    USER = "user"
    GLOBAL = "global"


class ExerciseProfile(BaseModel):
    """
    Exercise metadata consumed by the progression engines.

    An exercise without an owner (``user_id is None``) is global.

    Examples:
        >>> ExerciseProfile(id="pull-up", title="Pull-ups", is_bodyweight=True)
        >>> ExerciseProfile(id="banded-squat", title="Banded Squat",
        ...                 band_type=BandType.RESISTANCE)
    """

    model_config = ConfigDict(frozen=True)

    id: ExerciseId
    title: str = Field(..., min_length=1)
    user_id: Optional[str] = Field(default=None, description="Owner; None for global exercises")
    is_bodyweight: bool = False
    band_type: Optional[BandType] = None

    @property
    def is_banded(self) -> bool:
        return self.band_type is not None

    @property
    def scope(self) -> ExerciseScope:
        return ExerciseScope.GLOBAL if self.user_id is None else ExerciseScope.USER

    def to_candidate(self) -> "MatchCandidate":
        """Project this exercise into a name-matching candidate."""
        return MatchCandidate(id=self.id, title=self.title, scope=self.scope, owner_id=self.user_id)


class MatchCandidate(BaseModel):
    """
    An exercise the name matcher may select.

    Candidates are supplied by the persistence layer and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: ExerciseId
    title: str
    scope: ExerciseScope = ExerciseScope.GLOBAL
    owner_id: Optional[str] = Field(default=None, description="Owning user for user-scoped exercises")
    created_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_owner(self) -> "MatchCandidate":
        """A user-scoped candidate must name its owner."""
        if self.scope == ExerciseScope.USER and self.owner_id is None:
            raise ValueError("User-scoped candidates require an owner_id")
        return self

    def is_visible_to(self, user_id: str) -> bool:
        """Global exercises are visible to everyone, user exercises only to their owner."""
        if self.scope == ExerciseScope.GLOBAL:
            return True
        return str(self.owner_id) == str(user_id)
