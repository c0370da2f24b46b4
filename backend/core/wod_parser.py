"""
Workout notation parser.

Line-oriented markup for workout templates:

    # Strength
    [[Back Squat]]: 5-5-5-3-3-1
    [Bench Press]: 3x8-12

    # Conditioning
    > AMRAP 12min
    10 [[Box Jumps]]
    15 [Push-ups]

- ``#`` starts a block; the rest of the line is its name
- ``>`` starts a special format inside the current block; following entries
  belong to it until the next ``>`` or ``#``
- ``[[name]]`` is a loggable exercise, ``[name]`` a prescriptive one
- ``<count> [name]`` records a rep count, ``[name]: <scheme>`` a rep scheme
- ``//`` and ``--`` lines are comments

Parsing is best-effort: lines that match nothing are dropped and the parse
never fails.
"""
import logging
import re
from typing import List, Optional

from pydantic import ValidationError

from domain.models.workout_document import (
    Block,
    CustomScheme,
    ExerciseEntry,
    RepLadder,
    RepScheme,
    SetsByRepRange,
    SetsByReps,
    SingleSet,
    SpecialFormatEntry,
    TimeCap,
    TimeDistance,
    WorkoutDocument,
)

logger = logging.getLogger(__name__)


_COMMENT_PREFIXES = ("//", "--")

_ENTRY_RE = re.compile(
    r"^(?:(?P<count>\d+)\s+)?"
    r"(?:\[\[(?P<loggable>[^\[\]]+)\]\]|\[(?P<name>[^\[\]]+)\])"
    r"(?P<rest>.*)$"
)
# schemes allowed after the brackets without a colon
_BARE_SCHEME_RE = re.compile(r"^(?:\d+\s*x\s*\d+(?:-\d+)?|\d+(?:-\d+)+)$", re.IGNORECASE)

_SETS_BY_REPS_RE = re.compile(r"^(\d+)\s*x\s*(\d+)$", re.IGNORECASE)
_SETS_BY_RANGE_RE = re.compile(r"^(\d+)\s*x\s*(\d+)-(\d+)$", re.IGNORECASE)
_LADDER_RE = re.compile(r"^\d+(?:-\d+)+$")
_SINGLE_RE = re.compile(r"^\d+$")
_TIME_DISTANCE_RE = re.compile(r"^(\d+)(m|min|km|cal|sec)$", re.IGNORECASE)
_TIME_RE = re.compile(r"^(\d+):(\d+)$")


def parse_scheme(text: str) -> RepScheme:
    """
    Parse the scheme part of an exercise line.

    Examples:
        >>> parse_scheme("5-5-3").display
        '5-5-3'
        >>> parse_scheme("3 x 8").display
        '3x8'
        >>> parse_scheme("heavy singles").type
        'custom'
    """
    text = text.strip()
    try:
        m = _SETS_BY_REPS_RE.match(text)
        if m:
            return SetsByReps(sets=int(m.group(1)), reps=int(m.group(2)))
        m = _SETS_BY_RANGE_RE.match(text)
        if m:
            return SetsByRepRange(
                sets=int(m.group(1)), reps_min=int(m.group(2)), reps_max=int(m.group(3))
            )
        if _LADDER_RE.match(text):
            return RepLadder(reps=[int(r) for r in text.split("-")])
        if _SINGLE_RE.match(text):
            return SingleSet(reps=int(text))
        m = _TIME_DISTANCE_RE.match(text)
        if m:
            return TimeDistance(value=int(m.group(1)), unit=m.group(2).lower())
        m = _TIME_RE.match(text)
        if m:
            return TimeCap(minutes=int(m.group(1)), seconds=int(m.group(2)))
    except ValidationError:
        logger.debug(f"Scheme '{text}' out of range, keeping as custom text")
    return CustomScheme(text=text)


class WorkoutNotationParser:
    """Parses workout notation into a WorkoutDocument and back."""

    def parse(self, text: str) -> WorkoutDocument:
        """
        Parse workout text.

        Entries that appear before any ``#`` header go into a block with an
        empty name.
        """
        blocks: List[Block] = []
        block: Optional[Block] = None
        special: Optional[SpecialFormatEntry] = None

        for line_number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith(_COMMENT_PREFIXES):
                continue

            if line.startswith("#"):
                block = Block(name=line.lstrip("#").strip())
                blocks.append(block)
                special = None
                continue

            if line.startswith(">"):
                if block is None:
                    block = Block(name="")
                    blocks.append(block)
                special = SpecialFormatEntry(description=line[1:].strip())
                block.exercises.append(special)
                continue

            entry = self.parse_entry(line)
            if entry is None:
                logger.debug(f"Ignoring line {line_number}: {line!r}")
                continue

            if block is None:
                block = Block(name="")
                blocks.append(block)
            if special is not None:
                special.exercises.append(entry)
            else:
                block.exercises.append(entry)

        return WorkoutDocument(blocks=blocks)

    def parse_entry(self, line: str) -> Optional[ExerciseEntry]:
        """Parse a single exercise line, or return None if it is not one."""
        m = _ENTRY_RE.match(line.strip())
        if not m:
            return None

        loggable = m.group("loggable") is not None
        name = (m.group("loggable") if loggable else m.group("name")).strip()
        if not name:
            return None

        rest = m.group("rest").strip()
        scheme = None
        if rest.startswith(":"):
            scheme_text = rest[1:].strip()
            if scheme_text:
                scheme = parse_scheme(scheme_text)
        elif rest:
            if not _BARE_SCHEME_RE.match(rest):
                return None
            scheme = parse_scheme(rest)

        count = m.group("count")
        return ExerciseEntry(
            name=name,
            loggable=loggable,
            scheme=scheme,
            reps=int(count) if count is not None else None,
        )

    def unparse(self, document: WorkoutDocument) -> str:
        """Serialize a document; blocks are separated by a blank line."""
        chunks = []
        for block in document.blocks:
            lines = [f"# {block.name}".rstrip()]
            for entry in block.exercises:
                if isinstance(entry, SpecialFormatEntry):
                    lines.append(f"> {entry.description}".rstrip())
                    lines.extend(self.unparse_entry(e) for e in entry.exercises)
                else:
                    lines.append(self.unparse_entry(entry))
            chunks.append("\n".join(lines))
        return "\n\n".join(chunks)

    def unparse_entry(self, entry: ExerciseEntry) -> str:
        name = f"[[{entry.name}]]" if entry.loggable else f"[{entry.name}]"
        if entry.reps is not None:
            name = f"{entry.reps} {name}"
        if entry.scheme is not None:
            return f"{name}: {entry.scheme.display}"
        return name


_default_parser = WorkoutNotationParser()


def parse(text: str) -> WorkoutDocument:
    """Parse workout text with the default parser."""
    return _default_parser.parse(text)


def unparse(document: WorkoutDocument) -> str:
    """Serialize a document with the default parser."""
    return _default_parser.unparse(document)
