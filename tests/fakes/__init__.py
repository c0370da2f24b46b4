"""
In-memory fakes for the lift log and exercise repository ports.

Features:
- Each fake mirrors its Protocol in application.ports method for method
- seed() loads fixtures, reset() clears state between tests
- Factory functions build a default exercise catalog and session histories

Usage:
    from tests.fakes import FakeLiftLogRepository, create_exercises_repo

    # Direct instantiation
    logs = FakeLiftLogRepository()
    logs.add_log("user1", "bench-press", [(100, 5), (100, 5)])

    # Factory function with pre-populated data
    exercises = create_exercises_repo()
"""
from typing import List, Optional, Sequence
from datetime import datetime, timedelta, timezone

from domain.models.band import BandType
from domain.models.exercise import ExerciseProfile
from tests.fakes.exercises_repository import FakeExercisesRepository
from tests.fakes.lift_log_repository import FakeLiftLogRepository, SetSpec


# =============================================================================
# Default Test Data
# =============================================================================


DEFAULT_EXERCISES: List[ExerciseProfile] = [
    ExerciseProfile(id="bench-press", title="Bench Press"),
    ExerciseProfile(id="back-squat", title="Back Squat"),
    ExerciseProfile(id="deadlift", title="Deadlift"),
    ExerciseProfile(id="push-press", title="Push Press"),
    ExerciseProfile(id="dumbbell-row", title="Dumbbell Row"),
    ExerciseProfile(id="kettlebell-swing", title="Kettlebell Swings"),
    ExerciseProfile(id="pull-up", title="Pull-ups", is_bodyweight=True),
    ExerciseProfile(id="push-up", title="Push Up", is_bodyweight=True),
    ExerciseProfile(id="banded-squat", title="Banded Squat", band_type=BandType.RESISTANCE),
    ExerciseProfile(id="assisted-pull-up", title="Assisted Pull-up", band_type=BandType.ASSISTANCE),
]


# =============================================================================
# Factory Functions
# =============================================================================


def create_exercises_repo(
    *,
    extra: Optional[List[ExerciseProfile]] = None,
    include_defaults: bool = True,
) -> FakeExercisesRepository:
    """
    Create a FakeExercisesRepository with the default global exercises.

    Args:
        extra: Additional exercises (e.g. user-owned ones)
        include_defaults: Whether to include DEFAULT_EXERCISES

    Returns:
        Pre-populated FakeExercisesRepository
    """
    repo = FakeExercisesRepository()
    if include_defaults:
        repo.seed(DEFAULT_EXERCISES)
    if extra:
        repo.seed(extra)
    return repo


def create_lift_log_repo(
    *,
    user_id: str = "test_user",
    exercise_id: str = "bench-press",
    sessions: Sequence[Sequence[SetSpec]] = (),
    now: Optional[datetime] = None,
    days_between: int = 3,
) -> FakeLiftLogRepository:
    """
    Create a FakeLiftLogRepository with a series of sessions.

    Sessions are given oldest first; the last one is logged at ``now`` and
    each earlier one ``days_between`` days before the next.

    Args:
        user_id: Owner of the generated logs
        exercise_id: Exercise for the generated logs
        sessions: Set specs per session, oldest first
        now: Timestamp of the newest session (defaults to UTC now)
        days_between: Spacing between sessions in days

    Returns:
        Pre-populated FakeLiftLogRepository
    """
    repo = FakeLiftLogRepository()
    now = now or datetime.now(timezone.utc)
    count = len(sessions)
    for i, sets in enumerate(sessions):
        logged_at = now - timedelta(days=days_between * (count - 1 - i))
        repo.add_log(user_id, exercise_id, sets, logged_at=logged_at)
    return repo


__all__ = [
    "FakeExercisesRepository",
    "FakeLiftLogRepository",
    "DEFAULT_EXERCISES",
    "create_exercises_repo",
    "create_lift_log_repo",
]
