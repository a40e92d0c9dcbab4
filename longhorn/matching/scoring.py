"""
Connection strength scoring for the Longhorn Network.
"""

from __future__ import annotations

from typing import Dict, List, Protocol, Sequence, Tuple, TYPE_CHECKING

from ..config import (
    DEFAULT_STUDENT_KIND,
    ROOMMATE_PREF_BONUS,
    SHARED_INTERNSHIP_BONUS,
    SAME_MAJOR_BONUS,
    SAME_AGE_BONUS,
)
from ..log import get_logger
from ..models.student import is_real_internship

if TYPE_CHECKING:
    from ..models.student import Student

logger = get_logger(__name__)


class ScoreStrategy(Protocol):
    def score(self, a: "Student", b: "Student") -> int:
        ...


def _lower(s: str) -> str:
    return str(s).strip().lower()


def _zero_components() -> Dict[str, int]:
    return {"roommate_pref": 0, "shared_internships": 0, "same_major": 0, "same_age": 0, "total": 0}


class UniversityScoreStrategy:
    """
    Directional score of `a` towards `b`. All rules are additive:
      +4 if b is named in a's roommate preferences
      +3 for every case-insensitive pair of equal internships (multiset, "None" excluded)
      +2 for the same non-empty major
      +1 for the same known age
    """

    kind = DEFAULT_STUDENT_KIND

    def components(self, a: "Student", b: "Student") -> Dict[str, int]:
        if getattr(b, "kind", None) not in SCORE_STRATEGIES:
            return _zero_components()

        pref = 0
        b_name = _lower(b.name)
        if any(p is not None and _lower(p) == b_name for p in a.roommate_preferences):
            pref = ROOMMATE_PREF_BONUS

        shared = 0
        a_jobs = [_lower(c) for c in a.previous_internships if is_real_internship(c)]
        b_jobs = [_lower(c) for c in b.previous_internships if is_real_internship(c)]
        for c in a_jobs:
            for d in b_jobs:
                if c == d:
                    shared += SHARED_INTERNSHIP_BONUS

        major = 0
        if a.major and b.major and _lower(a.major) == _lower(b.major):
            major = SAME_MAJOR_BONUS

        age = 0
        if a.age > 0 and b.age > 0 and a.age == b.age:
            age = SAME_AGE_BONUS

        return {
            "roommate_pref": pref,
            "shared_internships": shared,
            "same_major": major,
            "same_age": age,
            "total": pref + shared + major + age,
        }

    def score(self, a: "Student", b: "Student") -> int:
        return self.components(a, b)["total"]


SCORE_STRATEGIES: Dict[str, ScoreStrategy] = {
    DEFAULT_STUDENT_KIND: UniversityScoreStrategy(),
}


def register_score_strategy(kind: str, strategy: ScoreStrategy) -> None:
    """Make a new student kind known to the scorer."""
    SCORE_STRATEGIES[kind] = strategy


def compute_score_components(a: "Student", b: "Student") -> Dict[str, int]:
    """
    Returns the per-rule breakdown of score(a, b):
    - roommate_pref / shared_internships / same_major / same_age
    - total
    Unknown kinds on either side score zero everywhere.
    """
    strategy = SCORE_STRATEGIES.get(getattr(a, "kind", None))
    if strategy is None or getattr(b, "kind", None) not in SCORE_STRATEGIES:
        return _zero_components()
    components = getattr(strategy, "components", None)
    if components is not None:
        return components(a, b)
    return {"total": int(strategy.score(a, b))}


def compute_connection_strength(a: "Student", b: "Student") -> int:
    """Directional connection strength of a towards b."""
    strategy = SCORE_STRATEGIES.get(getattr(a, "kind", None))
    if strategy is None or getattr(b, "kind", None) not in SCORE_STRATEGIES:
        return 0
    return int(strategy.score(a, b))


def build_edge_weights_for_population(students: Sequence["Student"]) -> Dict[Tuple[str, str], int]:
    """
    Compute max(score(a,b), score(b,a)) for every unordered pair (i < j),
    keyed by (a.name, b.name) in population order.
    """
    weights: Dict[Tuple[str, str], int] = {}
    items: List["Student"] = list(students)
    n = len(items)
    for i in range(n):
        a = items[i]
        for j in range(i + 1, n):
            b = items[j]
            w1 = compute_connection_strength(a, b)
            w2 = compute_connection_strength(b, a)
            weights[(a.name, b.name)] = max(w1, w2)
    logger.debug("Scored %d pairs over %d students", len(weights), n)
    return weights
