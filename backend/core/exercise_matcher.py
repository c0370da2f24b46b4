"""
Exercise name matcher for mapping free-text names to a user's exercises.

Matching is tiered; the first tier that yields any candidate wins:
1. Exact normalized match
2. Abbreviation-expanded match ("DB Row" -> "Dumbbell Row")
3. Candidate starts with the query
4. Query appears as whole words inside the candidate
5. Query appears anywhere inside the candidate

Within a tier the order is deterministic: tier-specific primary key
(shortest title, or closest length for partial matches), then the user's
own exercises before global ones, then title, then id.

Only the querying user's exercises and global exercises are eligible.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, TYPE_CHECKING
from enum import Enum

from rapidfuzz import fuzz

from backend.core.normalize import compact_key, expand_abbreviations, normalize_name
from domain.models.exercise import ExerciseScope, MatchCandidate

if TYPE_CHECKING:
    from application.ports import ExercisesRepository

logger = logging.getLogger(__name__)


class MatchTier(str, Enum):
    """Which tier produced the match, strongest first."""
    EXACT = "exact"
    ABBREVIATION = "abbreviation"
    STARTS_WITH = "starts_with"
    WHOLE_WORD = "whole_word"
    PARTIAL = "partial"


TIER_ORDER = [
    MatchTier.EXACT,
    MatchTier.ABBREVIATION,
    MatchTier.STARTS_WITH,
    MatchTier.WHOLE_WORD,
    MatchTier.PARTIAL,
]


@dataclass
class ExerciseMatch:
    """Result of a successful match."""
    candidate: MatchCandidate
    tier: MatchTier


@dataclass
class MatchSuggestion:
    """A fuzzy "did you mean" suggestion."""
    candidate: MatchCandidate
    score: float  # 0.0 to 1.0


@dataclass(frozen=True)
class _Keys:
    """Precomputed comparison forms of one name."""
    normalized: str
    compact: str
    tokens: Tuple[str, ...]
    expanded: str
    expanded_compact: str

    @classmethod
    def of(cls, text: str) -> "_Keys":
        normalized = normalize_name(text)
        expanded = expand_abbreviations(normalized)
        return cls(
            normalized=normalized,
            compact=compact_key(normalized),
            tokens=tuple(normalized.split()),
            expanded=expanded,
            expanded_compact=compact_key(expanded),
        )


def _contains_tokens(haystack: Tuple[str, ...], needle: Tuple[str, ...]) -> bool:
    n = len(needle)
    if n == 0:
        return False
    return any(haystack[i:i + n] == needle for i in range(len(haystack) - n + 1))


class ExerciseNameMatcher:
    """
    Service for matching free-text exercise names to visible exercises.

    Args:
        exercises_repository: Source of the candidate pool
        min_partial_length: Minimum compact query length for the
            starts-with and partial tiers
    """

    def __init__(
        self,
        exercises_repository: "ExercisesRepository",
        *,
        min_partial_length: int = 3,
    ):
        self._repo = exercises_repository
        self._min_partial_length = min_partial_length

    def candidates_for(self, user_id: str) -> List[MatchCandidate]:
        """The user's own exercises plus global exercises."""
        pool = self._repo.get_available_to_user(user_id)
        return [c for c in pool if c.is_visible_to(user_id)]

    def match(self, query: str, user_id: str) -> Optional[ExerciseMatch]:
        """
        Match a free-text name against the user's candidate pool.

        Args:
            query: Exercise name as typed
            user_id: Requesting user

        Returns:
            ExerciseMatch for the best candidate, or None if no tier matched
        """
        if not query or not normalize_name(query):
            return None

        candidates = self.candidates_for(user_id)
        if not candidates:
            return None

        keyed = [(c, _Keys.of(c.title)) for c in candidates]
        q = _Keys.of(query)
        for tier in TIER_ORDER:
            ranked = self._rank(tier, q, keyed)
            if ranked:
                logger.debug(f"{tier.value} match: '{query}' -> '{ranked[0].title}'")
                return ExerciseMatch(candidate=ranked[0], tier=tier)

        logger.debug(f"No match found for '{query}'")
        return None

    def find_best_match(self, query: str, user_id: str) -> Optional[MatchCandidate]:
        """Best candidate for ``query``, or None."""
        result = self.match(query, user_id)
        return result.candidate if result else None

    def rank_tier(
        self,
        tier: MatchTier,
        query: str,
        candidates: List[MatchCandidate],
    ) -> List[MatchCandidate]:
        """
        Candidates that satisfy one tier, best first.

        Scope filtering is not applied here; pass an already visible pool.
        """
        keyed = [(c, _Keys.of(c.title)) for c in candidates]
        return self._rank(tier, _Keys.of(query), keyed)

    def suggest_matches(
        self,
        query: str,
        user_id: str,
        limit: int = 5,
        score_cutoff: float = 0.5,
    ) -> List[MatchSuggestion]:
        """
        Get top N fuzzy suggestions for a name that may not match any tier.

        Scores are rapidfuzz token_set_ratio on abbreviation-expanded names.

        Args:
            query: Exercise name as typed
            user_id: Requesting user
            limit: Maximum number of suggestions
            score_cutoff: Minimum score (0.0 to 1.0)

        Returns:
            Suggestions sorted by score, then title
        """
        q = _Keys.of(query)
        if not q.normalized:
            return []

        suggestions = []
        for candidate in self.candidates_for(user_id):
            keys = _Keys.of(candidate.title)
            score = fuzz.token_set_ratio(q.expanded, keys.expanded) / 100.0
            if score >= score_cutoff:
                suggestions.append((MatchSuggestion(candidate=candidate, score=score), keys))

        suggestions.sort(key=lambda item: (-item[0].score, item[1].normalized, str(item[0].candidate.id)))
        return [s for s, _ in suggestions[:limit]]

    def _rank(
        self,
        tier: MatchTier,
        q: _Keys,
        keyed: List[Tuple[MatchCandidate, _Keys]],
    ) -> List[MatchCandidate]:
        if not q.normalized:
            return []

        long_enough = len(q.compact) >= self._min_partial_length
        predicates: Dict[MatchTier, Callable[[_Keys], bool]] = {
            MatchTier.EXACT: lambda k: k.compact == q.compact,
            MatchTier.ABBREVIATION: lambda k: k.expanded_compact == q.expanded_compact,
            MatchTier.STARTS_WITH: lambda k: long_enough and k.compact.startswith(q.compact),
            MatchTier.WHOLE_WORD: lambda k: _contains_tokens(k.tokens, q.tokens),
            MatchTier.PARTIAL: lambda k: long_enough and q.compact in k.compact,
        }
        matches = [(c, k) for c, k in keyed if predicates[tier](k)]

        def sort_key(item: Tuple[MatchCandidate, _Keys]):
            candidate, keys = item
            if tier == MatchTier.PARTIAL:
                primary = abs(len(keys.normalized) - len(q.normalized))
            else:
                primary = len(keys.normalized)
            scope = 0 if candidate.scope == ExerciseScope.USER else 1
            return (primary, scope, keys.normalized, str(candidate.id))

        return [c for c, _ in sorted(matches, key=sort_key)]
