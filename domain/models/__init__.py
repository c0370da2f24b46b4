"""
Domain models for the lift logic core.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Band / BandConfig: colour-coded bands and their difficulty ordering
- LiftLog / LoggedSet: historical sets the progression engines read
- ProgressionSuggestion / WeightSuggestion / NoSuggestion: engine results
- ExerciseProfile / MatchCandidate: exercise metadata and matchable titles
- WorkoutDocument: parsed workout notation (blocks, entries, rep schemes)

Usage:
    >>> from datetime import datetime
    >>> from domain.models import LiftLog, LoggedSet

    >>> log = LiftLog(
    ...     id="log-1",
    ...     user_id="user-1",
    ...     exercise_id="bench-press",
    ...     logged_at=datetime(2024, 1, 1),
    ...     sets=[LoggedSet(weight=100, reps=5)],
    ... )
    >>> log.top_set.weight
    100.0
"""

from domain.models.band import DEFAULT_BAND_COLORS, Band, BandConfig, BandSpec, BandType, Direction
from domain.models.exercise import ExerciseId, ExerciseProfile, ExerciseScope, MatchCandidate
from domain.models.lift_log import LiftLog, LoggedSet
from domain.models.progression import (
    DEFAULT_INCREMENT,
    LOOKBACK_WEEKS,
    NoSuggestion,
    ProgressionConfig,
    ProgressionModel,
    ProgressionSuggestion,
    SuggestionResult,
    WeightSuggestion,
    WeightSuggestionResult,
)
from domain.models.workout_document import (
    Block,
    CustomScheme,
    ExerciseEntry,
    RepLadder,
    RepScheme,
    SetsByRepRange,
    SetsByReps,
    SingleSet,
    SpecialFormat,
    SpecialFormatEntry,
    TimeCap,
    TimeDistance,
    WorkoutDocument,
)

__all__ = [
    # Bands
    "Band",
    "BandConfig",
    "BandSpec",
    "BandType",
    "Direction",
    "DEFAULT_BAND_COLORS",
    # Lift history
    "LiftLog",
    "LoggedSet",
    # Progression
    "ProgressionConfig",
    "ProgressionModel",
    "ProgressionSuggestion",
    "WeightSuggestion",
    "NoSuggestion",
    "SuggestionResult",
    "WeightSuggestionResult",
    "LOOKBACK_WEEKS",
    "DEFAULT_INCREMENT",
    # Exercises
    "ExerciseId",
    "ExerciseProfile",
    "ExerciseScope",
    "MatchCandidate",
    # Workout notation
    "WorkoutDocument",
    "Block",
    "ExerciseEntry",
    "SpecialFormatEntry",
    "SpecialFormat",
    "RepScheme",
    "RepLadder",
    "SetsByReps",
    "SetsByRepRange",
    "SingleSet",
    "TimeDistance",
    "TimeCap",
    "CustomScheme",
]
