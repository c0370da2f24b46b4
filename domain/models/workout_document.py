"""
Workout document produced by the workout notation parser.

Structure (nesting depth is exactly two):

    WorkoutDocument
    └── Block (name)
        ├── ExerciseEntry
        └── SpecialFormatEntry (description)
            └── ExerciseEntry

Rep schemes are a tagged union discriminated by ``type``. Every variant
renders a canonical ``display`` string that parses back to an equal scheme.
"""

import re
from enum import Enum
from typing import Annotated, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# Rep schemes
# =============================================================================


class RepLadder(BaseModel):
    """``5-5-3-3-1`` style ladder of per-set rep counts."""

    type: Literal["rep_ladder"] = "rep_ladder"
    reps: List[int] = Field(..., min_length=1)

    @property
    def display(self) -> str:
        return "-".join(str(r) for r in self.reps)


class SetsByReps(BaseModel):
    """``3x8``: a number of sets at the same rep count."""

    type: Literal["sets_by_reps"] = "sets_by_reps"
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=0)

    @property
    def display(self) -> str:
        return f"{self.sets}x{self.reps}"

    def as_ladder(self) -> RepLadder:
        """Expand to the equivalent ladder of repeated rep counts."""
        return RepLadder(reps=[self.reps] * self.sets)


class SetsByRepRange(BaseModel):
    """``3x8-12``: sets with a target rep range."""

    type: Literal["sets_by_rep_range"] = "sets_by_rep_range"
    sets: int = Field(..., ge=1)
    reps_min: int = Field(..., ge=0)
    reps_max: int = Field(..., ge=0)

    @property
    def display(self) -> str:
        return f"{self.sets}x{self.reps_min}-{self.reps_max}"


class SingleSet(BaseModel):
    """A single rep count, e.g. ``1`` for a max single."""

    type: Literal["single_set"] = "single_set"
    reps: int = Field(..., ge=0)

    @property
    def display(self) -> str:
        return str(self.reps)


class TimeDistance(BaseModel):
    """A distance, duration or calorie target such as ``500m`` or ``5min``."""

    type: Literal["time_distance"] = "time_distance"
    value: int = Field(..., ge=0)
    unit: Literal["m", "min", "km", "cal", "sec"]

    @property
    def display(self) -> str:
        return f"{self.value}{self.unit}"


class TimeCap(BaseModel):
    """A clock time such as ``2:00``."""

    type: Literal["time"] = "time"
    minutes: int = Field(..., ge=0)
    seconds: int = Field(..., ge=0)

    @property
    def display(self) -> str:
        return f"{self.minutes}:{self.seconds:02d}"


class CustomScheme(BaseModel):
    """Free text that matched no other scheme, kept verbatim."""

    type: Literal["custom"] = "custom"
    text: str = Field(..., min_length=1)

    @property
    def display(self) -> str:
        return self.text


RepScheme = Annotated[
    Union[RepLadder, SetsByReps, SetsByRepRange, SingleSet, TimeDistance, TimeCap, CustomScheme],
    Field(discriminator="type"),
]


# =============================================================================
# Entries
# =============================================================================


class ExerciseEntry(BaseModel):
    """
    A named exercise inside a block or special format.

    ``loggable`` is True for ``[[name]]`` entries the user is expected to
    record, False for ``[name]`` prescriptive-only entries. ``reps`` holds the
    count prefix of ``10 [Box Jumps]`` lines.
    """

    kind: Literal["exercise"] = "exercise"
    name: str = Field(..., min_length=1)
    loggable: bool = False
    scheme: Optional[RepScheme] = None
    reps: Optional[int] = Field(default=None, ge=0)


class SpecialFormat(str, Enum):
    """Recognised timed/round-based workout formats."""

    AMRAP = "AMRAP"
    EMOM = "EMOM"
    FOR_TIME = "For Time"
    ROUNDS = "Rounds"
    CUSTOM = "Custom"


_AMRAP_RE = re.compile(r"^AMRAP\s+(\d+)\s*min", re.IGNORECASE)
_EMOM_RE = re.compile(r"^EMOM\s+(\d+)\s*min", re.IGNORECASE)
_LADDER_FORMAT_RE = re.compile(r"^(\d+(?:-\d+)+)\s+(For Time|Rounds?)\b", re.IGNORECASE)
_FOR_TIME_RE = re.compile(r"^For Time\b", re.IGNORECASE)
_ROUNDS_RE = re.compile(r"^(\d+)\s+Rounds?\b", re.IGNORECASE)


class SpecialFormatEntry(BaseModel):
    """
    A ``> AMRAP 12min`` style group of exercises.

    The description is stored verbatim; ``format`` and the related accessors
    classify it without changing what gets serialised.

    Examples:
        >>> entry = SpecialFormatEntry(description="AMRAP 12min")
        >>> entry.format
        <SpecialFormat.AMRAP: 'AMRAP'>
        >>> entry.duration_minutes
        12
    """

    kind: Literal["special_format"] = "special_format"
    description: str = ""
    exercises: List[ExerciseEntry] = Field(default_factory=list)

    @property
    def format(self) -> SpecialFormat:
        text = self.description.strip()
        if _AMRAP_RE.match(text):
            return SpecialFormat.AMRAP
        if _EMOM_RE.match(text):
            return SpecialFormat.EMOM
        ladder = _LADDER_FORMAT_RE.match(text)
        if ladder:
            if ladder.group(2).lower().startswith("round"):
                return SpecialFormat.ROUNDS
            return SpecialFormat.FOR_TIME
        if _FOR_TIME_RE.match(text):
            return SpecialFormat.FOR_TIME
        if _ROUNDS_RE.match(text):
            return SpecialFormat.ROUNDS
        return SpecialFormat.CUSTOM

    @property
    def duration_minutes(self) -> Optional[int]:
        """Time limit for AMRAP/EMOM formats."""
        text = self.description.strip()
        match = _AMRAP_RE.match(text) or _EMOM_RE.match(text)
        return int(match.group(1)) if match else None

    @property
    def rounds(self) -> Optional[int]:
        """Round count for ``5 Rounds`` formats."""
        match = _ROUNDS_RE.match(self.description.strip())
        return int(match.group(1)) if match else None

    @property
    def rep_scheme(self) -> Optional[str]:
        """Ladder prefix for ``21-15-9 For Time`` formats."""
        match = _LADDER_FORMAT_RE.match(self.description.strip())
        return match.group(1) if match else None


BlockEntry = Annotated[
    Union[ExerciseEntry, SpecialFormatEntry],
    Field(discriminator="kind"),
]


class Block(BaseModel):
    """A named section of a workout; entries keep source order."""

    name: str = ""
    exercises: List[BlockEntry] = Field(default_factory=list)

    def iter_exercises(self) -> Iterator[ExerciseEntry]:
        """Yield every exercise, flattening special formats."""
        for entry in self.exercises:
            if isinstance(entry, SpecialFormatEntry):
                yield from entry.exercises
            else:
                yield entry


class WorkoutDocument(BaseModel):
    """Parsed workout: blocks in document order."""

    blocks: List[Block] = Field(default_factory=list)

    def iter_exercises(self) -> Iterator[ExerciseEntry]:
        for block in self.blocks:
            yield from block.iter_exercises()

    def loggable_exercises(self) -> List[ExerciseEntry]:
        """Exercises marked ``[[...]]`` in document order."""
        return [e for e in self.iter_exercises() if e.loggable]

    def exercise_names(self) -> List[str]:
        """Distinct exercise names in first-seen order."""
        seen = []
        for entry in self.iter_exercises():
            if entry.name not in seen:
                seen.append(entry.name)
        return seen
