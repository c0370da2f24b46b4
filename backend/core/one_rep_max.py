"""
One-rep-max estimation.

Uses the Epley formula in the form ``1RM = weight * (1 + 0.0333 * reps)``.
The formula is applied for every rep count including 1, so a single at
100 estimates 103.33. No rounding is applied here; callers round for display.
"""
from typing import Iterable, Optional

from application.exceptions import InvalidInput
from domain.models.lift_log import LoggedSet


EPLEY_COEFFICIENT = 0.0333


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """
    Estimate 1RM from a submaximal set.

    Args:
        weight: Weight lifted (>= 0)
        reps: Reps completed (>= 1)

    Returns:
        Estimated 1RM

    Raises:
        InvalidInput: weight is negative or reps is below 1
    """
    if weight < 0:
        raise InvalidInput(f"weight must be >= 0, got {weight}")
    if reps < 1:
        raise InvalidInput(f"reps must be >= 1, got {reps}")
    return weight * (1.0 + EPLEY_COEFFICIENT * reps)


def weight_for_target_reps(one_rep_max: float, target_reps: int) -> float:
    """
    Project a 1RM back to the weight liftable for ``target_reps``.

    Inverse of :func:`estimate_one_rep_max`.

    Raises:
        InvalidInput: one_rep_max is negative or target_reps is below 1
    """
    if one_rep_max < 0:
        raise InvalidInput(f"one_rep_max must be >= 0, got {one_rep_max}")
    if target_reps < 1:
        raise InvalidInput(f"target_reps must be >= 1, got {target_reps}")
    return one_rep_max / (1.0 + EPLEY_COEFFICIENT * target_reps)


def best_one_rep_max(sets: Iterable[LoggedSet]) -> Optional[float]:
    """Highest 1RM estimate across the given sets, or None when there are none."""
    estimates = [estimate_one_rep_max(s.weight, s.reps) for s in sets]
    return max(estimates) if estimates else None
