"""
Exercise name normalization.

normalize_name("Pull-Ups!")  -> "pull up"
compact_key("Pull ups")      -> "pullup"
expand_abbreviations("db row") -> "dumbbell row"
"""
import re, yaml, pathlib
from typing import Dict, List, Tuple


ROOT = pathlib.Path(__file__).resolve().parents[2]

DICT = yaml.safe_load((ROOT / "shared/dictionaries/exercise_abbreviations.yaml").read_text())


_STRIP_RE = re.compile(r"[^a-z0-9\s_-]")
_SEPARATOR_RE = re.compile(r"[-_]")
_VOWEL_RE = re.compile(r"[aeiou]")


def singularize(token: str) -> str:
    """
    Drop a single trailing "s" from a plural token.

    Three-letter tokens need a vowel in the stem ("ups" -> "up"), so shorthand
    such as "kbs" keeps its "s".
    """
    if len(token) < 3 or not token.endswith("s") or token.endswith("ss"):
        return token
    if len(token) == 3 and not _VOWEL_RE.search(token[:-1]):
        return token
    return token[:-1]


def normalize_name(text: str) -> str:
    t = text.lower()
    t = _STRIP_RE.sub("", t)
    t = _SEPARATOR_RE.sub(" ", t)
    return " ".join(singularize(w) for w in t.split())


def compact_key(text: str) -> str:
    """Normalized form without spaces, so hyphenated, spaced and joined spellings agree."""
    return singularize(normalize_name(text).replace(" ", ""))


def _load_abbreviations() -> List[Tuple[Tuple[str, ...], List[str]]]:
    table: Dict[Tuple[str, ...], List[str]] = {}
    for short, full in (DICT.get("abbreviations") or {}).items():
        key = tuple(normalize_name(str(short)).split())
        if key:
            table[key] = normalize_name(str(full)).split()
    # longest abbreviations first so multi-token forms win
    return sorted(table.items(), key=lambda item: len(item[0]), reverse=True)


ABBREVIATIONS = _load_abbreviations()


def expand_abbreviations(normalized: str) -> str:
    """
    Replace abbreviation tokens in an already normalized name.

    Only whole tokens are expanded: "db row" becomes "dumbbell row" but
    "dbl" is left alone.
    """
    tokens = normalized.split()
    out: List[str] = []
    i = 0
    while i < len(tokens):
        for short, full in ABBREVIATIONS:
            n = len(short)
            if tuple(tokens[i:i + n]) == short:
                out.extend(full)
                i += n
                break
        else:
            out.append(tokens[i])
            i += 1
    return " ".join(out)
