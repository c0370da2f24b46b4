"""
Band progression engine.

Single memoryless transition over (band, reps), driven by the last set of
the most recent log:

- reps below the threshold: same band, one more rep
- reps at or above the threshold with a harder band available: move to it
  and reset reps to the configured default
- reps at or above the threshold on the hardest band: plateau (same band,
  same reps)
"""
import logging
from typing import TYPE_CHECKING, Optional

from backend.core.band_catalog import BandCatalog
from domain.models.band import BandType, Direction
from domain.models.exercise import ExerciseProfile
from domain.models.lift_log import LoggedSet
from domain.models.progression import (
    NoSuggestion,
    ProgressionModel,
    ProgressionSuggestion,
    SuggestionResult,
)

if TYPE_CHECKING:
    from application.ports import LiftLogRepository

logger = logging.getLogger(__name__)


class BandProgressionEngine:
    """
    Suggests the next band and rep count for banded exercises.

    Args:
        catalog: Band catalog built from the frozen band configuration
        lift_logs: Repository used by :meth:`suggest` to read history
    """

    def __init__(self, catalog: BandCatalog, lift_logs: Optional["LiftLogRepository"] = None):
        self._catalog = catalog
        self._lift_logs = lift_logs

    @property
    def catalog(self) -> BandCatalog:
        return self._catalog

    def next_step(
        self,
        last_set: LoggedSet,
        band_type: BandType,
        sets: int = 1,
    ) -> SuggestionResult:
        """
        Apply one band transition to the given set.

        Args:
            last_set: Most recent logged set, with its band colour
            band_type: Resistance or assistance
            sets: Set count carried through unchanged

        Returns:
            ProgressionSuggestion, or NoSuggestion when the set has no known band
        """
        color = last_set.band_color
        if color is None:
            return NoSuggestion(reason="Last set has no band colour")
        if color not in self._catalog:
            logger.warning(f"Unknown band colour '{color}' in lift history")
            return NoSuggestion(reason=f"Unknown band colour '{color}'")

        threshold = self._catalog.max_reps_before_band_change
        next_color = color
        next_reps = last_set.reps + 1

        if last_set.reps >= threshold:
            harder = self._catalog.neighbor(color, band_type, Direction.HARDER)
            if harder is not None:
                next_color = harder
                next_reps = self._catalog.default_reps_on_band_change
                logger.debug(f"Band change {color} -> {harder} after {last_set.reps} reps")
            else:
                next_reps = last_set.reps
                logger.debug(f"Band plateau on {color} at {last_set.reps} reps")

        return ProgressionSuggestion(
            model=ProgressionModel.BAND,
            suggested_weight=last_set.weight,
            reps=next_reps,
            sets=sets,
            band_color=next_color,
            last_weight=last_set.weight,
            last_reps=last_set.reps,
            last_sets=sets,
            last_band_color=color,
        )

    def suggest(self, user_id: str, exercise: ExerciseProfile) -> SuggestionResult:
        """
        Suggest the next session for a banded exercise from its latest log.

        Only the single most recent log is consulted, regardless of its age.
        """
        if exercise.band_type is None:
            return NoSuggestion(reason=f"Exercise '{exercise.id}' is not banded")
        if self._lift_logs is None:
            raise RuntimeError("BandProgressionEngine.suggest requires a lift log repository")

        logs = self._lift_logs.get_logs(user_id, exercise.id, limit=1)
        if not logs or logs[0].last_set is None:
            return NoSuggestion(reason="No lift history")

        latest = logs[0]
        return self.next_step(latest.last_set, exercise.band_type, sets=latest.set_count)

    def describe(self, last_set: LoggedSet, band_type: BandType) -> Optional[str]:
        """
        Hint text shown once the rep threshold is reached.

        Examples:
            "Try blue band with 8 reps"
            "Try without assistance band"

        Returns:
            Hint text, or None when no band change is due
        """
        color = last_set.band_color
        if color is None or color not in self._catalog:
            return None
        if last_set.reps < self._catalog.max_reps_before_band_change:
            return None

        harder = self._catalog.neighbor(color, band_type, Direction.HARDER)
        if harder is not None:
            return f"Try {harder} band with {self._catalog.default_reps_on_band_change} reps"
        if band_type == BandType.ASSISTANCE:
            return "Try without assistance band"
        return None
