"""
Training Progression Service.

Chooses a progression model per exercise and delegates to it:
- Banded exercises: band progression (latest log, any age)
- Bodyweight exercises: double progression
- Weighted exercises: linear or double progression, inferred from how the
  two most recent sessions changed
"""
from typing import Optional, List
from datetime import datetime
import logging

from application.ports.lift_log_repository import LiftLogRepository
from application.ports.exercises_repository import ExercisesRepository
from backend.core.band_catalog import BandCatalog
from backend.core.band_progression import BandProgressionEngine
from backend.core.weight_progression import DoubleProgression, LinearProgression
from domain.models.exercise import ExerciseId
from domain.models.lift_log import LiftLog
from domain.models.progression import (
    NoSuggestion,
    ProgressionConfig,
    ProgressionModel,
    SuggestionResult,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Training Progression Service
# =============================================================================


class TrainingProgressionService:
    """
    Entry point for "what should I do next session?" questions.

    Provides:
    - Model dispatch by exercise type (banded / bodyweight / weighted)
    - Linear vs double progression inference from recent history
    """

    def __init__(
        self,
        lift_logs: LiftLogRepository,
        exercises: ExercisesRepository,
        band_catalog: BandCatalog,
        config: Optional[ProgressionConfig] = None,
    ):
        """
        Initialize the progression service.

        Args:
            lift_logs: Repository for lift history
            exercises: Repository for exercise metadata
            band_catalog: Catalog built from the band configuration
            config: Weight progression thresholds (defaults apply when omitted)
        """
        self._lift_logs = lift_logs
        self._exercises = exercises
        self._config = config or ProgressionConfig()
        self._band = BandProgressionEngine(band_catalog, lift_logs)
        self._linear = LinearProgression(lift_logs, exercises, self._config)
        self._double = DoubleProgression(lift_logs, exercises, self._config)

    def suggest(
        self,
        user_id: str,
        exercise_id: ExerciseId,
        *,
        show_extra_weight: bool = False,
        now: Optional[datetime] = None,
    ) -> SuggestionResult:
        """
        Suggest the next session for an exercise.

        Args:
            user_id: User ID
            exercise_id: Exercise ID
            show_extra_weight: User preference allowing bodyweight exercises to
                roll over into added weight
            now: Reference time for the lookback window

        Returns:
            ProgressionSuggestion, or NoSuggestion when the exercise is unknown
            or has no usable history
        """
        exercise = self._exercises.get_by_id(exercise_id)
        if exercise is None:
            logger.warning(f"Exercise not found: {exercise_id}")
            return NoSuggestion(reason=f"Exercise not found: {exercise_id}")

        if exercise.is_banded:
            return self._band.suggest(user_id, exercise)

        if exercise.is_bodyweight:
            return self._double.suggest(
                user_id, exercise_id, show_extra_weight=show_extra_weight, now=now
            )

        since = self._linear.window_start(now)
        logs = self._lift_logs.get_logs(user_id, exercise_id, since=since)
        model = self.infer_model(logs)
        if model is None:
            return NoSuggestion(reason="No recent lift history")

        logger.debug(f"Inferred {model.value} progression for exercise {exercise_id}")
        if model == ProgressionModel.DOUBLE:
            return self._double.suggest(user_id, exercise_id, now=now)
        return self._linear.suggest(user_id, exercise_id, now=now)

    def infer_model(self, logs: List[LiftLog]) -> Optional[ProgressionModel]:
        """
        Infer the progression model a lifter is following.

        Compares the top sets of the two most recent logs (newest first):
        - same weight, more reps -> DOUBLE
        - more weight, reps dropped into the double-progression range -> DOUBLE
        - more weight, same reps -> LINEAR
        Anything else, or a single log, falls back to the rep range of the
        latest top set: inside [min_reps, max_reps] -> DOUBLE, else LINEAR.

        Returns:
            The inferred model, or None when there are no logs with sets
        """
        logs = [log for log in logs if log.sets]
        if not logs:
            return None

        latest = logs[0].top_set
        min_reps, max_reps = self._config.min_reps, self._config.max_reps

        if len(logs) >= 2:
            previous = logs[1].top_set
            if latest.weight == previous.weight and latest.reps > previous.reps:
                return ProgressionModel.DOUBLE
            if latest.weight > previous.weight:
                if latest.reps < previous.reps and min_reps <= latest.reps <= max_reps:
                    return ProgressionModel.DOUBLE
                if latest.reps == previous.reps:
                    return ProgressionModel.LINEAR

        if min_reps <= latest.reps <= max_reps:
            return ProgressionModel.DOUBLE
        return ProgressionModel.LINEAR
