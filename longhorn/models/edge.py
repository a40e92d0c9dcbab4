"""
Graph edge model for the Longhorn Network.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from .student import Student


@dataclass(frozen=True)
class GraphEdge:
    source: "Student"
    target: "Student"
    weight: int  # >= 0; a 0-weight edge still connects its endpoints

    @property
    def neighbor(self) -> "Student":
        return self.target

    def to_dict(self) -> Dict:
        return {"source": self.source.name, "target": self.target.name, "weight": int(self.weight)}

    def __str__(self) -> str:
        return f"{self.target.name}({self.weight})"
