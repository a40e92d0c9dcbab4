"""
Menu actions for the Longhorn Network CLI.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..errors import InvalidInputError, InvalidPopulationError, LonghornError, SocialTaskTimeout
from ..graph import SocialGraph
from ..loader import load_population
from ..matching import assign_roommates, find_blocking_pairs, roommate_pairs
from ..models.population import Population, validate_population
from ..models.student import Student
from ..referral import ReferralPathFinder
from ..samples import SAMPLE_CASES
from ..social import run_social_demo
from .helpers import input_int_in_range, input_text
from .visualization import draw_social_graph


def load_students_from_file() -> Optional[List[Student]]:
    """Ask for a path and load it; None if loading failed."""
    print("\n=== Load Students From File ===")
    path = input_text("File path (blank = configured default): ")
    try:
        students = validate_population(load_population(path or None))
    except OSError as e:
        print(f"Failed to load students: {e}")
        return None
    except InvalidPopulationError as e:
        print(f"Invalid student file: {e}")
        return None
    print(f"Loaded {len(students)} students.")
    return students


def load_sample_case() -> List[Student]:
    print("\n=== Load Sample Case ===")
    for key, factory in SAMPLE_CASES.items():
        print(f"  {key}) {factory.__doc__}")
    choice = input_int_in_range(f"Choice (1-{len(SAMPLE_CASES)}): ", 1, len(SAMPLE_CASES))
    return SAMPLE_CASES[str(choice)]()


def show_students(students: List[Student]) -> None:
    if not students:
        print("\n(No students loaded.)")
        return
    print("\n=== Students ===")
    for s in students:
        print(f"  {s.describe()}")


def show_social_graph(students: List[Student]) -> None:
    graph = SocialGraph(students)
    print("\n--- Social graph adjacency list ---")
    print(graph.format_adjacency() or "(empty)")

    W = graph.weight_matrix()
    if W.size == 0:
        return
    nodes = graph.all_nodes()
    width = max(len(s.name) for s in nodes)
    print("\n--- Connection strength matrix ---")
    for s, row in zip(nodes, W):
        print(f"  {s.name:<{width}} {np.array2string(row)}")
    if W.max() > 0:
        i, j = np.unravel_index(np.argmax(W), W.shape)
        print(f"Strongest connection: {nodes[i].name} <-> {nodes[j].name} ({W[i, j]})")


def show_roommate_matching(students: List[Student]) -> None:
    if not students:
        print("\n(No students loaded.)")
        return
    assign_roommates(students)
    pop = Population.from_students(students)

    print("\n=== Roommate Assignments ===")
    for a, b in roommate_pairs(students):
        print(f"  {a.name} <--> {b.name}")
    unmatched = pop.unmatched()
    if unmatched:
        print("Unmatched: " + ", ".join(s.name for s in unmatched))

    blocking = find_blocking_pairs(students)
    if blocking:
        print("Blocking pairs: " + ", ".join(f"{a.name}/{b.name}" for a, b in blocking))
    else:
        print("No blocking pairs: assignment is stable.")


def _ask_student(students: List[Student], prompt: str) -> Optional[Student]:
    name = input_text(prompt)
    s = Population.from_students(students).find(name)
    if s is None:
        print(f"No student named {name!r}.")
    return s


def show_referral_path(students: List[Student]) -> Optional[List[Student]]:
    if not students:
        print("\n(No students loaded.)")
        return None
    print("\n=== Referral Path ===")
    start = _ask_student(students, "Start student: ")
    if start is None:
        return None
    company = input_text("Target company: ")

    finder = ReferralPathFinder(SocialGraph(students))
    try:
        path = finder.find_referral_path(start, company)
    except InvalidInputError as e:
        print(f"Invalid input: {e}")
        return None

    if not path:
        print(f"No referral path from {start.name} to {company}.")
    else:
        names = " -> ".join(s.name for s in path)
        print(f"Referral path: {names} (strength {finder.path_strength(path)})")
    return path


def show_social_demo(students: List[Student]) -> None:
    if len(students) < 2:
        print("\nNeed at least two students for the friend/chat demo.")
        return
    a, b = students[0], students[1]
    try:
        run_social_demo(a, b)
    except SocialTaskTimeout as e:
        print(f"Social demo did not finish: {e}")
        return
    print(f"{a.name} friends: {sorted(a.friends)}")
    print(f"{b.name} friends: {sorted(b.friends)}")
    print(f"{a.name} chat log:")
    for line in a.chat_history:
        print(f"  {line}")


def plot_social_graph(students: List[Student], highlight_path: Optional[List[Student]] = None) -> None:
    draw_social_graph(SocialGraph(students), highlight_path=highlight_path)


def run_sample_scenarios() -> None:
    """Graph, roommates and a DummyCompany referral search for every sample case."""
    for key, factory in SAMPLE_CASES.items():
        students = factory()
        print("\n========================================")
        print(f"=== Sample Case {key} ===")
        print("========================================")
        show_students(students)
        show_social_graph(students)
        show_roommate_matching(students)
        try:
            path = ReferralPathFinder(SocialGraph(students)).find_referral_path(students[0], "DummyCompany")
        except LonghornError as e:
            print(f"Referral search failed: {e}")
            continue
        print("Referral path to DummyCompany: " + (" -> ".join(s.name for s in path) if path else "(none)"))
