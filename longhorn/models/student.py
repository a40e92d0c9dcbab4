"""
Student model for the Longhorn Network.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ..config import DEFAULT_STUDENT_KIND, NO_INTERNSHIP_TOKEN


def is_real_internship(company: Optional[str]) -> bool:
    """False for None, blank entries and the "None" placeholder."""
    if company is None:
        return False
    c = str(company).strip()
    return bool(c) and c.lower() != NO_INTERNSHIP_TOKEN.lower()


@dataclass(eq=False)
class Student:
    name: str
    age: int = 0  # 0 = unknown
    gender: str = ""
    year: int = 0
    major: str = ""  # "" = unknown
    gpa: float = 0.0
    roommate_preferences: List[str] = field(default_factory=list)  # highest priority first
    previous_internships: List[str] = field(default_factory=list)
    kind: str = DEFAULT_STUDENT_KIND

    # Written only by the roommate matcher: name of the assigned roommate
    roommate: Optional[str] = None

    # Written only by the social interaction tasks
    friends: Set[str] = field(default_factory=set)
    chat_history: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.roommate_preferences = list(self.roommate_preferences or [])
        self.previous_internships = list(self.previous_internships or [])
        self.major = self.major or ""
        self.gender = self.gender or ""

    # Identity is the (case-sensitive) name
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Student):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Student({self.name!r})"

    @property
    def has_preferences(self) -> bool:
        return len(self.roommate_preferences) > 0

    def real_internships(self) -> List[str]:
        return [c for c in self.previous_internships if is_real_internship(c)]

    def has_internship_at(self, company: Optional[str]) -> bool:
        """Case-insensitive check; the "None" placeholder never matches."""
        if not is_real_internship(company):
            return False
        target = str(company).strip().lower()
        return any(c.strip().lower() == target for c in self.real_internships())

    def preference_rank(self, name: Optional[str]) -> float:
        """
        Position of `name` in this student's roommate preferences
        (case-insensitive). Absent names rank at infinity.
        """
        if name is None:
            return math.inf
        key = name.lower()
        for i, pref in enumerate(self.roommate_preferences):
            if pref is not None and pref.lower() == key:
                return i
        return math.inf

    def connection_strength(self, other: "Student") -> int:
        # Import here to avoid circular imports.
        from ..matching.scoring import compute_connection_strength
        return compute_connection_strength(self, other)

    def add_friend(self, other: Optional["Student"]) -> None:
        if other is None or other.name == self.name:
            return
        self.friends.add(other.name)

    def add_chat_message(self, message: str) -> None:
        self.chat_history.append(message)

    def describe(self) -> str:
        return (
            f"{self.name} | age={self.age} gender={self.gender or '-'} year={self.year} "
            f"major={self.major or '-'} gpa={self.gpa:.2f} | "
            f"prefs={self.roommate_preferences} internships={self.previous_internships}"
        )

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "age": int(self.age),
            "gender": self.gender,
            "year": int(self.year),
            "major": self.major,
            "gpa": float(self.gpa),
            "roommate_preferences": list(self.roommate_preferences),
            "previous_internships": list(self.previous_internships),
            "kind": self.kind,
            "roommate": self.roommate,
        }

    @staticmethod
    def from_dict(d: Dict) -> "Student":
        d2 = dict(d)
        d2.setdefault("roommate_preferences", [])
        d2.setdefault("previous_internships", [])
        d2.setdefault("kind", DEFAULT_STUDENT_KIND)
        d2.pop("friends", None)
        d2.pop("chat_history", None)
        return Student(**d2)
