"""
Exercises Repository Interface (Port).

This module defines the abstract interface for reading exercise metadata.
Implementations may use any backend; the core only relies on this contract.
"""
from typing import List, Optional, Protocol

from domain.models.exercise import ExerciseId, ExerciseProfile, MatchCandidate


class ExercisesRepository(Protocol):
    """
    Abstract interface for querying exercises.

    Used by the progression engines (profile lookup) and by the
    ExerciseNameMatcher (candidate pool).
    """

    def get_by_id(self, exercise_id: ExerciseId) -> Optional[ExerciseProfile]:
        """
        Get an exercise profile by its ID.

        Args:
            exercise_id: The exercise identifier

        Returns:
            ExerciseProfile or None if not found
        """
        ...

    def get_available_to_user(self, user_id: str) -> List[MatchCandidate]:
        """
        Get every exercise a user may select: their own plus all global ones.

        Args:
            user_id: The requesting user's ID

        Returns:
            List of match candidates, in no particular order
        """
        ...
