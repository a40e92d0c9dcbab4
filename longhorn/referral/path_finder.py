"""
Referral path search for the Longhorn Network.

Best-first (Dijkstra) search over the social graph from a start student to
the nearest student holding an internship at a target company. Stronger
connections are cheaper to traverse.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, Sequence, Set, Tuple, TYPE_CHECKING

from ..errors import InvalidInputError
from ..log import get_logger
from ..models.student import Student, is_real_internship

if TYPE_CHECKING:
    from ..graph.social_graph import SocialGraph

logger = get_logger(__name__)


def edge_cost(weight: int, max_weight: int) -> int:
    """
    cost = (max_weight + 1) - weight

    Always >= 1, so zero-weight edges stay traversable and every hop
    has a positive price; a stronger edge is always cheaper.
    """
    return (max(0, int(max_weight)) + 1) - max(0, int(weight))


class ReferralPathFinder:
    def __init__(self, graph: "SocialGraph"):
        if graph is None:
            raise InvalidInputError("graph must not be None")
        self.graph = graph

    def find_referral_path(self, start: Optional[Student], target_company: Optional[str]) -> List[Student]:
        """
        Returns [start, ..., holder] where holder has interned at target_company
        (case-insensitive), or [] if no reachable student qualifies.
        """
        if start is None:
            raise InvalidInputError("start student must not be None")
        if not isinstance(target_company, str) or not target_company.strip():
            raise InvalidInputError("target company must be a non-empty string")

        if not is_real_internship(target_company):
            logger.info("Referral search for %r: placeholder company never matches", target_company)
            return []

        max_w = self.graph.max_weight()
        counter = itertools.count()

        dist: Dict[Student, int] = {start: 0}
        prev: Dict[Student, Optional[Student]] = {start: None}
        finalized: Set[Student] = set()
        heap: List[Tuple[int, int, Student]] = [(0, next(counter), start)]

        while heap:
            cost, _, node = heapq.heappop(heap)
            if node in finalized:
                continue
            finalized.add(node)

            if node.has_internship_at(target_company):
                path = self._rebuild(prev, node)
                logger.info(
                    "Referral path %s -> %s for %s: %s (cost %d)",
                    start.name, node.name, target_company,
                    " -> ".join(s.name for s in path), cost,
                )
                return path

            for edge in self.graph.neighbors_of(node):
                nb = edge.target
                if nb in finalized:
                    continue
                new_cost = cost + edge_cost(edge.weight, max_w)
                if nb not in dist or new_cost < dist[nb]:
                    dist[nb] = new_cost
                    prev[nb] = node
                    heapq.heappush(heap, (new_cost, next(counter), nb))

        logger.info("No referral path from %s to %s", start.name, target_company)
        return []

    @staticmethod
    def _rebuild(prev: Dict[Student, Optional[Student]], end: Student) -> List[Student]:
        path: List[Student] = []
        node: Optional[Student] = end
        while node is not None:
            path.append(node)
            node = prev[node]
        path.reverse()
        return path

    def path_strength(self, path: Sequence[Student]) -> int:
        """Sum of edge weights along a path; missing hops count as 0."""
        total = 0
        for a, b in zip(path, path[1:]):
            total += self.graph.edge_weight(a, b) or 0
        return total


def find_referral_path(graph: "SocialGraph", start: Optional[Student], target_company: Optional[str]) -> List[Student]:
    """Convenience wrapper around ReferralPathFinder."""
    return ReferralPathFinder(graph).find_referral_path(start, target_company)
