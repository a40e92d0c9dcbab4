"""
Roommate matching for the Longhorn Network.

Deferred acceptance over each student's ranked roommate preferences. Every
student is both a proposer and a receiver; assignments are stored as name
keys on Student.roommate.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, List, Optional, Set, Tuple, TYPE_CHECKING

from ..log import get_logger
from ..models.population import Population

if TYPE_CHECKING:
    from ..models.student import Student

logger = get_logger(__name__)


def _reconcile_roommates(population: Population) -> int:
    """
    Null every roommate key that does not point at a student pointing back.
    Returns the number of repaired assignments.
    """
    repaired = 0
    for s in population:
        if s.roommate is None:
            continue
        r = population.get(s.roommate)
        if r is None or r.roommate != s.name:
            logger.debug("Dropping non-reciprocal roommate %s -> %s", s.name, s.roommate)
            s.roommate = None
            repaired += 1
    return repaired


def assign_roommates(students: Optional[Iterable["Student"]]) -> Dict[str, Optional[str]]:
    """
    Pair students as roommates in place and return {name: roommate name or None}.

    Key behavior:
    - All previous assignments are cleared first.
    - Only students with a non-empty preference list propose, in population
      order; anyone named in a list can be proposed to.
    - A proposer that is already matched when dequeued is dropped; it goes
      back in the queue only if it is later displaced.
    - Unknown names and self-references are skipped.
    - A matched candidate switches only to a proposer it ranks strictly
      better (names absent from its list rank last).
    - A final sweep nulls any assignment that is not mutual.
    - Some preference profiles admit no stable assignment. The result is then
      still mutual, but two students can end up unmatched even though each
      lists the other; find_blocking_pairs reports them.
    """
    population = Population.from_students(students)

    if not len(population):
        logger.info("No students to match.")
        return {}

    # 1) Clear assignments
    for s in population:
        s.roommate = None

    # 2) Seed proposers
    next_index: Dict[str, int] = {s.name: 0 for s in population}
    free: Deque["Student"] = deque()
    queued: Set[str] = set()

    def enqueue(s: "Student") -> None:
        if s.name not in queued:
            queued.add(s.name)
            free.append(s)

    def has_options(s: "Student") -> bool:
        return next_index[s.name] < len(s.roommate_preferences)

    for s in population:
        if s.has_preferences:
            enqueue(s)

    # 3) Proposal loop
    proposals = 0
    while free:
        proposer = free.popleft()
        queued.discard(proposer.name)

        if proposer.roommate is not None or not has_options(proposer):
            continue

        candidate_name = proposer.roommate_preferences[next_index[proposer.name]]
        next_index[proposer.name] += 1
        proposals += 1

        candidate = population.find(candidate_name)
        if candidate is None or candidate.name == proposer.name:
            logger.debug("%s: skipping preference %r (no such student)", proposer.name, candidate_name)
            if has_options(proposer):
                enqueue(proposer)
            continue

        current = population.get(candidate.roommate)

        if current is None:
            proposer.roommate = candidate.name
            candidate.roommate = proposer.name
            logger.debug("%s <-> %s (candidate was free)", proposer.name, candidate.name)
            continue

        if candidate.preference_rank(proposer.name) < candidate.preference_rank(current.name):
            current.roommate = None
            proposer.roommate = candidate.name
            candidate.roommate = proposer.name
            logger.debug("%s <-> %s (displacing %s)", proposer.name, candidate.name, current.name)
            if has_options(current):
                enqueue(current)
        else:
            logger.debug("%s rejected by %s", proposer.name, candidate.name)
            if has_options(proposer):
                enqueue(proposer)

    # 4) Reciprocity sweep
    repaired = _reconcile_roommates(population)

    pairs = population.roommate_pairs()
    logger.info(
        "Roommate matching: %d pairs, %d unmatched, %d proposals, %d repaired",
        len(pairs), len(population.unmatched()), proposals, repaired,
    )
    return {s.name: s.roommate for s in population}


def roommate_pairs(students: Iterable["Student"]) -> List[Tuple["Student", "Student"]]:
    """Mutual pairs, each listed once, in population order."""
    return Population.from_students(students).roommate_pairs()


def find_blocking_pairs(students: Iterable["Student"]) -> List[Tuple["Student", "Student"]]:
    """
    Pairs (a, b), not roommates of each other, where each names the other and
    ranks them strictly above their current roommate (no roommate ranks last).
    An empty result means the assignment is stable.
    """
    population = Population.from_students(students)
    blocking: List[Tuple["Student", "Student"]] = []
    seen = set()

    for a in population:
        for pref in a.roommate_preferences:
            b = population.find(pref)
            if b is None or b.name == a.name or a.roommate == b.name:
                continue
            key = tuple(sorted((a.name, b.name)))
            if key in seen:
                continue
            a_gain = a.preference_rank(b.name) < a.preference_rank(a.roommate)
            b_gain = b.preference_rank(a.name) < b.preference_rank(b.roommate)
            if a_gain and b_gain:
                seen.add(key)
                blocking.append((a, b))
    return blocking
