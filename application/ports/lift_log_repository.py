"""
Lift Log Repository Interface (Port).

This module defines the abstract interface for reading logged lifting
history. Used by the band and weight progression engines.
"""
from datetime import datetime
from typing import List, Optional, Protocol

from domain.models.exercise import ExerciseId
from domain.models.lift_log import LiftLog


class LiftLogRepository(Protocol):
    """
    Abstract interface for querying lift logs.

    Implementations must return logs newest first.
    """

    def get_logs(
        self,
        user_id: str,
        exercise_id: ExerciseId,
        *,
        since: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[LiftLog]:
        """
        Get a user's logs for one exercise.

        Args:
            user_id: The user's ID
            exercise_id: The exercise identifier
            since: Only logs with logged_at >= since (None = all history)
            limit: Maximum number of logs to return (None = no limit)

        Returns:
            List of LiftLog ordered by logged_at descending
        """
        ...
