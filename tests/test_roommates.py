"""
Tests for roommate matching.
"""

import pytest

from longhorn.errors import InvalidPopulationError
from longhorn.matching import assign_roommates, find_blocking_pairs, roommate_pairs
from longhorn.models import Population


def assert_reciprocal(students):
    by_name = {s.name: s for s in students}
    for s in students:
        if s.roommate is not None:
            assert by_name[s.roommate].roommate == s.name


def pair_names(students):
    return {frozenset((a.name, b.name)) for a, b in roommate_pairs(students)}


class TestAssignRoommates:
    """Test the deferred acceptance matcher."""

    def test_sample_case_1_pairs(self, case1):
        result = assign_roommates(case1)
        assert_reciprocal(case1)
        assert pair_names(case1) == {
            frozenset(("Alice", "Bob")),
            frozenset(("Charlie", "Frank")),
            frozenset(("Dana", "Evan")),
        }
        assert all(result[s.name] is not None for s in case1)

    def test_sample_case_1_is_stable(self, case1):
        assign_roommates(case1)
        assert find_blocking_pairs(case1) == []

    def test_empty_preferences_stay_unmatched_when_unnamed(self, case3):
        assign_roommates(case3)
        assert_reciprocal(case3)
        jack, kim, leo = case3
        assert jack.roommate == "Kim"
        assert kim.roommate == "Jack"
        assert leo.roommate is None

    def test_empty_preference_student_can_be_chosen(self, make_student):
        a = make_student("A", prefs=["B"])
        b = make_student("B")
        assign_roommates([a, b])
        assert a.roommate == "B"
        assert b.roommate == "A"

    def test_even_mutual_group_all_matched(self, make_student):
        names = ["A", "B", "C", "D", "E", "F"]
        students = [make_student(n, prefs=[m for m in names if m != n]) for n in names]
        assign_roommates(students)
        assert_reciprocal(students)
        assert all(s.roommate is not None for s in students)

    def test_odd_mutual_group_at_most_one_unmatched(self, make_student):
        names = ["A", "B", "C", "D", "E"]
        students = [make_student(n, prefs=[m for m in names if m != n]) for n in names]
        assign_roommates(students)
        assert_reciprocal(students)
        assert sum(1 for s in students if s.roommate is None) == 1

    def test_sole_mutual_preferences(self, make_student):
        students = [
            make_student("A", prefs=["B"]),
            make_student("B", prefs=["A"]),
            make_student("C", prefs=["D"]),
            make_student("D", prefs=["C"]),
        ]
        assign_roommates(students)
        assert pair_names(students) == {frozenset(("A", "B")), frozenset(("C", "D"))}

    def test_candidate_switches_to_preferred_proposer(self, make_student):
        # A proposes to C first; B, whom C prefers, displaces A.
        a = make_student("A", prefs=["C", "D"])
        b = make_student("B", prefs=["C"])
        c = make_student("C", prefs=["B", "A"])
        d = make_student("D")
        assign_roommates([a, b, c, d])
        assert c.roommate == "B"
        assert b.roommate == "C"
        assert a.roommate == "D"
        assert d.roommate == "A"

    def test_unknown_names_are_skipped(self, make_student):
        a = make_student("A", prefs=["Ghost", "B"])
        b = make_student("B", prefs=["A"])
        assign_roommates([a, b])
        assert a.roommate == "B"

    def test_self_reference_is_skipped(self, make_student):
        a = make_student("A", prefs=["A"])
        b = make_student("B")
        assign_roommates([a, b])
        assert a.roommate is None
        assert b.roommate is None

    def test_duplicate_preferences_terminate(self, make_student):
        a = make_student("A", prefs=["B", "B", "B"])
        b = make_student("B", prefs=["C"])
        c = make_student("C", prefs=["B"])
        assign_roommates([a, b, c])
        assert_reciprocal([a, b, c])
        assert b.roommate == "C"
        assert a.roommate is None

    def test_case_insensitive_names(self, make_student):
        a = make_student("Alice", prefs=["bob"])
        b = make_student("Bob", prefs=["ALICE"])
        assign_roommates([a, b])
        assert a.roommate == "Bob"
        assert b.roommate == "Alice"

    def test_previous_assignments_are_cleared(self, make_student):
        a = make_student("A", roommate="Z")
        b = make_student("B", roommate="A")
        assign_roommates([a, b])
        assert a.roommate is None
        assert b.roommate is None

    def test_rerun_gives_same_result(self, case1):
        first = assign_roommates(case1)
        second = assign_roommates(case1)
        assert first == second

    def test_empty_population(self):
        assert assign_roommates([]) == {}

    def test_none_population_rejected(self):
        with pytest.raises(InvalidPopulationError):
            assign_roommates(None)

    def test_profile_without_stable_assignment(self, make_student):
        students = [
            make_student("A", prefs=["C", "D", "B"]),
            make_student("B", prefs=["A", "D", "C"]),
            make_student("C", prefs=["B", "D", "A"]),
            make_student("D", prefs=["C", "B", "A"]),
        ]
        result = assign_roommates(students)
        assert result == {"A": None, "B": None, "C": "D", "D": "C"}
        assert_reciprocal(students)
        blocking = [(x.name, y.name) for x, y in find_blocking_pairs(students)]
        assert ("A", "B") in blocking


class TestBlockingPairs:
    """Test the stability check."""

    def test_detects_blocking_pair(self, make_student):
        a = make_student("A", prefs=["B", "C"])
        b = make_student("B", prefs=["A", "D"])
        c = make_student("C", prefs=["A"])
        d = make_student("D", prefs=["B"])
        a.roommate, c.roommate = "C", "A"
        b.roommate, d.roommate = "D", "B"
        blocking = find_blocking_pairs([a, b, c, d])
        assert [(x.name, y.name) for x, y in blocking] == [("A", "B")]

    def test_population_helpers(self, case3):
        assign_roommates(case3)
        pop = Population.from_students(case3)
        assert [s.name for s in pop.unmatched()] == ["Leo"]
        assert pop.roommate_of(case3[0]).name == "Kim"
