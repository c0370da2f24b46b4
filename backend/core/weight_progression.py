"""
Weight-based progression for non-banded exercises.

Three entry points share the same history source and configuration:

- WeightProgressionEngine.suggest_next_weight: heaviest qualifying set ->
  1RM -> weight at the target reps -> plus the default increment
- LinearProgression: add weight each session, keeping reps and sets
- DoubleProgression: add reps until the top of the rep range, then add
  weight and drop back to the bottom of the range

Only logs inside the lookback window count. Missing history yields a
NoSuggestion, never an invented default weight.
"""
import logging
import math
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, List, Optional, Tuple

from application.exceptions import InvalidInput
from backend.core.one_rep_max import estimate_one_rep_max, weight_for_target_reps
from domain.models.exercise import ExerciseId, ExerciseProfile
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

if TYPE_CHECKING:
    from application.ports import ExercisesRepository, LiftLogRepository

logger = logging.getLogger(__name__)

__all__ = [
    "LOOKBACK_WEEKS",
    "DEFAULT_INCREMENT",
    "round_to_resolution",
    "WeightProgressionEngine",
    "LinearProgression",
    "DoubleProgression",
]


def round_to_resolution(weight: float, resolution: float) -> float:
    """
    Round a weight to the nearest multiple of ``resolution`` (halves round up).

    Examples:
        >>> round_to_resolution(102.5, 5.0)
        105.0
        >>> round_to_resolution(101.0, 5.0)
        100.0
    """
    # round first so float noise from the 1RM round trip cannot flip a half
    return math.floor(round(weight / resolution, 9) + 0.5) * resolution


class _WindowedHistory:
    """Shared plumbing: repository access and the lookback window."""

    def __init__(
        self,
        lift_logs: "LiftLogRepository",
        exercises: "ExercisesRepository",
        config: Optional[ProgressionConfig] = None,
    ):
        self._lift_logs = lift_logs
        self._exercises = exercises
        self._config = config or ProgressionConfig()

    @property
    def config(self) -> ProgressionConfig:
        return self._config

    def window_start(self, now: Optional[datetime] = None) -> datetime:
        """Earliest logged_at still inside the lookback window."""
        now = now or datetime.now(timezone.utc)
        return now - timedelta(weeks=self._config.lookback_weeks)

    def _get_exercise(self, exercise_id: ExerciseId) -> Optional[ExerciseProfile]:
        exercise = self._exercises.get_by_id(exercise_id)
        if exercise is None:
            logger.warning(f"Exercise not found: {exercise_id}")
        return exercise

    def _recent_logs(
        self,
        user_id: str,
        exercise_id: ExerciseId,
        now: Optional[datetime],
        limit: Optional[int] = None,
    ) -> List[LiftLog]:
        since = self.window_start(now)
        # empty logs are dropped before the limit applies
        logs = [log for log in self._lift_logs.get_logs(user_id, exercise_id, since=since) if log.sets]
        return logs if limit is None else logs[:limit]


class WeightProgressionEngine(_WindowedHistory):
    """
    Suggests a working weight for a target rep count from recent history.

    Examples:
        >>> engine = WeightProgressionEngine(lift_logs, exercises)
        >>> engine.suggest_next_weight("user-1", "bench-press", target_reps=5)
        WeightSuggestion(kind='weight', suggested_weight=105.0, ...)
    """

    def select_basis(self, logs: List[LiftLog], target_reps: int) -> Optional[LoggedSet]:
        """
        Pick the set a 1RM estimate should be based on.

        The heaviest set at exactly ``target_reps`` wins; without one, the
        heaviest set at any rep count. Ties go to more reps, then to the most
        recent log.
        """
        ranked: List[Tuple[LoggedSet, datetime]] = [
            (s, log.logged_at) for log in logs for s in log.sets
        ]
        if not ranked:
            return None

        exact = [item for item in ranked if item[0].reps == target_reps]
        pool = exact or ranked
        best, _ = max(pool, key=lambda item: (item[0].weight, item[0].reps, item[1]))
        return best

    def suggest_next_weight(
        self,
        user_id: str,
        exercise_id: ExerciseId,
        target_reps: int,
        *,
        now: Optional[datetime] = None,
    ) -> WeightSuggestionResult:
        """
        Suggest the weight to lift for ``target_reps`` next session.

        Args:
            user_id: The user's ID
            exercise_id: The exercise identifier
            target_reps: Planned rep count (>= 1)
            now: Reference time for the lookback window (defaults to UTC now)

        Returns:
            WeightSuggestion, or NoSuggestion for bodyweight/unknown exercises
            and when no set was logged inside the window

        Raises:
            InvalidInput: target_reps is below 1
        """
        if target_reps < 1:
            raise InvalidInput(f"target_reps must be >= 1, got {target_reps}")

        exercise = self._get_exercise(exercise_id)
        if exercise is None:
            return NoSuggestion(reason=f"Exercise not found: {exercise_id}")
        if exercise.is_bodyweight:
            return NoSuggestion(reason="Bodyweight exercises have no weight suggestion")

        logs = self._recent_logs(user_id, exercise_id, now)
        basis = self.select_basis(logs, target_reps)
        if basis is None:
            return NoSuggestion(
                reason=f"No history in the last {self._config.lookback_weeks} weeks"
            )

        one_rep_max = estimate_one_rep_max(basis.weight, basis.reps)
        suggested = weight_for_target_reps(one_rep_max, target_reps) + self._config.default_increment

        logger.debug(
            f"Weight suggestion for {exercise_id}: basis {basis.weight}x{basis.reps}, "
            f"1RM {one_rep_max:.1f}, target {target_reps} -> {suggested:.1f}"
        )

        return WeightSuggestion(
            suggested_weight=suggested,
            target_reps=target_reps,
            basis_weight=basis.weight,
            basis_reps=basis.reps,
            one_rep_max=one_rep_max,
        )


class LinearProgression(_WindowedHistory):
    """
    Linear progression: same reps and sets, more weight every session.

    The weight is re-derived from the 1RM of the last session's top set,
    rounded to the configured resolution, then incremented.
    """

    def suggest(
        self,
        user_id: str,
        exercise_id: ExerciseId,
        *,
        now: Optional[datetime] = None,
    ) -> SuggestionResult:
        logs = self._recent_logs(user_id, exercise_id, now, limit=1)
        if not logs:
            return NoSuggestion(reason="No recent lift history")

        latest = logs[0]
        top = latest.top_set
        one_rep_max = estimate_one_rep_max(top.weight, top.reps)
        working = round_to_resolution(
            weight_for_target_reps(one_rep_max, top.reps), self._config.weight_resolution
        )

        return ProgressionSuggestion(
            model=ProgressionModel.LINEAR,
            suggested_weight=working + self._config.default_increment,
            reps=top.reps,
            sets=latest.set_count,
            last_weight=top.weight,
            last_reps=top.reps,
            last_sets=latest.set_count,
        )


class DoubleProgression(_WindowedHistory):
    """
    Double progression: add a rep each session until ``max_reps``, then add
    weight and reset to ``min_reps``.

    Bodyweight exercises only roll over into added weight when the user opts
    in with ``show_extra_weight``; otherwise reps keep climbing.
    """

    def suggest(
        self,
        user_id: str,
        exercise_id: ExerciseId,
        *,
        show_extra_weight: bool = False,
        now: Optional[datetime] = None,
    ) -> SuggestionResult:
        exercise = self._get_exercise(exercise_id)
        if exercise is None:
            return NoSuggestion(reason=f"Exercise not found: {exercise_id}")

        logs = self._recent_logs(user_id, exercise_id, now, limit=1)
        if not logs:
            return NoSuggestion(reason="No recent lift history")

        latest = logs[0]
        top = latest.top_set
        return self.next_step(
            top,
            sets=latest.set_count,
            is_bodyweight=exercise.is_bodyweight,
            show_extra_weight=show_extra_weight,
        )

    def next_step(
        self,
        last_set: LoggedSet,
        *,
        sets: int = 1,
        is_bodyweight: bool = False,
        show_extra_weight: bool = False,
    ) -> ProgressionSuggestion:
        """Apply one double-progression step to a set."""
        cfg = self._config
        weight = last_set.weight
        reps = last_set.reps + 1

        if last_set.reps >= cfg.max_reps:
            if not is_bodyweight:
                weight = last_set.weight + cfg.default_increment
                reps = cfg.min_reps
            elif show_extra_weight:
                weight = last_set.weight + cfg.bodyweight_increment
                reps = cfg.min_reps

        return ProgressionSuggestion(
            model=ProgressionModel.DOUBLE,
            suggested_weight=weight,
            reps=reps,
            sets=sets,
            last_weight=last_set.weight,
            last_reps=last_set.reps,
            last_sets=sets,
        )
