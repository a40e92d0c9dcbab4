"""
Population model for the Longhorn Network.

Students live in an ordered arena keyed by name; roommate assignments are
stored as name keys on each Student and resolved through the arena.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..errors import InvalidPopulationError
from .student import Student


def validate_population(students: Optional[Iterable[Student]]) -> List[Student]:
    """
    Return the population as a list, or raise InvalidPopulationError when it
    is None, contains a non-Student, or repeats a name.
    """
    if students is None:
        raise InvalidPopulationError("population must not be None")

    out: List[Student] = []
    seen = set()
    for i, s in enumerate(students):
        if not isinstance(s, Student):
            raise InvalidPopulationError(f"entry {i} is not a Student: {s!r}")
        if s.name in seen:
            raise InvalidPopulationError(f"duplicate student name: {s.name!r}")
        seen.add(s.name)
        out.append(s)
    return out


@dataclass
class Population:
    students: Dict[str, Student] = field(default_factory=dict)

    @staticmethod
    def from_students(students: Optional[Iterable[Student]]) -> "Population":
        pop = Population()
        for s in validate_population(students):
            pop.students[s.name] = s
        return pop

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self):
        return iter(self.students.values())

    def __contains__(self, name: object) -> bool:
        return name in self.students

    def as_list(self) -> List[Student]:
        return list(self.students.values())

    def get(self, name: Optional[str]) -> Optional[Student]:
        """Exact (case-sensitive) lookup."""
        if name is None:
            return None
        return self.students.get(name)

    def find(self, name: Optional[str]) -> Optional[Student]:
        """Exact lookup, falling back to the first case-insensitive match."""
        if name is None:
            return None
        s = self.students.get(name)
        if s is not None:
            return s
        key = name.lower()
        for candidate in self.students.values():
            if candidate.name.lower() == key:
                return candidate
        return None

    def roommate_of(self, student: Student) -> Optional[Student]:
        return self.get(student.roommate)

    def roommate_pairs(self) -> List[Tuple[Student, Student]]:
        """Each mutual pair once, in population order."""
        pairs: List[Tuple[Student, Student]] = []
        seen = set()
        for s in self.students.values():
            r = self.roommate_of(s)
            if r is None or r.roommate != s.name or s.name in seen:
                continue
            seen.add(s.name)
            seen.add(r.name)
            pairs.append((s, r))
        return pairs

    def unmatched(self) -> List[Student]:
        return [s for s in self.students.values() if self.roommate_of(s) is None]
