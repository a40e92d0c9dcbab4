"""
Social graph for the Longhorn Network.

Each student maps to an ordered list of outgoing GraphEdges. Construction
scores every unordered pair and inserts both directions with the stronger
of the two directional scores, so the graph is symmetric by construction.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import networkx as nx
import numpy as np

from ..errors import InvalidInputError
from ..log import get_logger
from ..matching.scoring import build_edge_weights_for_population
from ..models.edge import GraphEdge
from ..models.population import validate_population
from ..models.student import Student

logger = get_logger(__name__)


class SocialGraph:
    """Weighted adjacency over a population; node and edge order follow insertion."""

    def __init__(self, students: Optional[Iterable[Student]] = None):
        self._adj: Dict[Student, List[GraphEdge]] = {}
        if students is None:
            return

        items = validate_population(students)
        for s in items:
            self._adj[s] = []

        by_name = {s.name: s for s in items}
        weights = build_edge_weights_for_population(items)
        for (a_name, b_name), w in weights.items():
            a = by_name[a_name]
            b = by_name[b_name]
            self.add_edge(a, b, w)
            self.add_edge(b, a, w)

        logger.info("Built social graph: %d students, %d edges", len(self._adj), self.edge_count())

    @classmethod
    def from_students(cls, students: Optional[Iterable[Student]]) -> "SocialGraph":
        """Same as the constructor, but a None population is rejected."""
        return cls(validate_population(students))

    def add_edge(self, a: Student, b: Student, weight: int) -> GraphEdge:
        """Add a single directed edge a -> b. Reciprocity is the caller's job."""
        if int(weight) < 0:
            raise InvalidInputError(f"edge weight must be non-negative, got {weight}")
        edge = GraphEdge(source=a, target=b, weight=int(weight))
        self._adj.setdefault(a, []).append(edge)
        self._adj.setdefault(b, [])
        return edge

    def neighbors_of(self, s: Optional[Student]) -> List[GraphEdge]:
        if s is None:
            return []
        return list(self._adj.get(s, []))

    def all_nodes(self) -> List[Student]:
        return list(self._adj.keys())

    def __contains__(self, s: object) -> bool:
        return s in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def edge_weight(self, a: Student, b: Student) -> Optional[int]:
        for e in self._adj.get(a, []):
            if e.target == b:
                return e.weight
        return None

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adj.values())

    def max_weight(self) -> int:
        return max((e.weight for edges in self._adj.values() for e in edges), default=0)

    def format_adjacency(self) -> str:
        """One line per node: 'name -> neighbor(weight), ...'."""
        lines = []
        for s, edges in self._adj.items():
            lines.append(f"{s.name} -> " + ", ".join(str(e) for e in edges))
        return "\n".join(lines)

    def display(self) -> None:
        logger.info("--- Social graph adjacency list ---\n%s", self.format_adjacency())

    def weight_matrix(self) -> np.ndarray:
        """Dense n x n matrix in node order; missing edges are 0."""
        nodes = self.all_nodes()
        index = {s: i for i, s in enumerate(nodes)}
        W = np.zeros((len(nodes), len(nodes)), dtype=int)
        for s, edges in self._adj.items():
            for e in edges:
                j = index.get(e.target)
                if j is not None:
                    W[index[s], j] = e.weight
        return W

    def to_networkx(self) -> nx.Graph:
        """Undirected NetworkX view keyed by student name, with 'weight' edge attributes."""
        G = nx.Graph()
        for s in self._adj:
            G.add_node(s.name, major=s.major, year=s.year)
        for s, edges in self._adj.items():
            for e in edges:
                G.add_edge(s.name, e.target.name, weight=int(e.weight))
        return G
