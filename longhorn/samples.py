"""
Built-in sample populations for the Longhorn Network.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .models.student import Student


def sample_case_1() -> List[Student]:
    """Two groups: four students with full mutual preferences, plus a pair."""
    return [
        Student("Alice", 20, "Female", 2, "Computer Science", 3.5, ["Bob", "Charlie", "Frank"], ["Google"]),
        Student("Bob", 21, "Male", 3, "Computer Science", 3.7, ["Alice", "Charlie", "Frank"], ["Google", "Microsoft"]),
        Student("Charlie", 20, "Male", 2, "Mathematics", 3.2, ["Alice", "Bob", "Frank"], ["None"]),
        Student("Frank", 23, "Male", 3, "Chemistry", 3.1, ["Alice", "Bob", "Charlie"], []),
        Student("Dana", 22, "Female", 4, "Biology", 3.8, ["Evan"], ["Pfizer"]),
        Student("Evan", 22, "Male", 4, "Biology", 3.6, ["Dana"], ["Moderna", "Pfizer"]),
    ]


def sample_case_2() -> List[Student]:
    """Three students; only Ivy has interned at DummyCompany."""
    return [
        Student("Greg", 24, "Male", 4, "Economics", 3.4, ["Helen", "Ivy"], ["InternshipA"]),
        Student("Helen", 24, "Female", 4, "Economics", 3.5, ["Greg", "Ivy"], ["InternshipB"]),
        Student("Ivy", 25, "Female", 4, "Economics", 3.8, ["Helen", "Greg"], ["DummyCompany"]),
    ]


def sample_case_3() -> List[Student]:
    """Three students; Leo has no roommate preferences."""
    return [
        Student("Jack", 19, "Male", 1, "History", 3.0, ["Kim"], ["MuseumIntern"]),
        Student("Kim", 19, "Female", 1, "History", 3.2, ["Jack"], ["MuseumIntern"]),
        Student("Leo", 20, "Male", 1, "History", 3.5, [], ["None"]),
    ]


SAMPLE_CASES: Dict[str, Callable[[], List[Student]]] = {
    "1": sample_case_1,
    "2": sample_case_2,
    "3": sample_case_3,
}
