"""
Domain layer for the lift logic core.

This package contains pure domain models that are independent of
storage and transport concerns: bands, lift logs, progression results,
exercise profiles and parsed workout documents.
"""

from domain.models import (
    Block,
    ExerciseProfile,
    LiftLog,
    LoggedSet,
    NoSuggestion,
    ProgressionSuggestion,
    WeightSuggestion,
    WorkoutDocument,
)

__all__ = [
    "Block",
    "ExerciseProfile",
    "LiftLog",
    "LoggedSet",
    "NoSuggestion",
    "ProgressionSuggestion",
    "WeightSuggestion",
    "WorkoutDocument",
]
