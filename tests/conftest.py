"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
from typing import List

from longhorn.log import set_verbose
from longhorn.models import Student
from longhorn.samples import sample_case_1, sample_case_2, sample_case_3


@pytest.fixture(autouse=True)
def quiet_logs():
    """Keep algorithm progress out of test output."""
    set_verbose(False)
    yield


@pytest.fixture
def make_student():
    """Factory for students with only the fields a test cares about."""
    def _make(name, prefs=None, internships=None, major="", age=0, **kwargs) -> Student:
        return Student(
            name=name,
            age=age,
            major=major,
            roommate_preferences=prefs or [],
            previous_internships=internships or [],
            **kwargs,
        )
    return _make


@pytest.fixture
def case1() -> List[Student]:
    """Two mutual-preference groups (4 + 2 students)."""
    return sample_case_1()


@pytest.fixture
def case2() -> List[Student]:
    """Greg / Helen / Ivy referral scenario."""
    return sample_case_2()


@pytest.fixture
def case3() -> List[Student]:
    """Jack / Kim pair plus Leo with no preferences."""
    return sample_case_3()


@pytest.fixture
def student_file(tmp_path):
    """A student data file with a comment, a header, a short row and bad numbers."""
    path = tmp_path / "students.txt"
    path.write_text(
        "# Longhorn sample data\n"
        "name,age,gender,year,major,gpa,roommatePrefs,internships\n"
        "Alice,20,Female,2,Computer Science,3.5,Bob;Charlie,Google\n"
        "\n"
        "Bob,21,Male,3,Computer Science,3.7,Alice,Google;Microsoft\n"
        "Charlie,abc,Male,2,Mathematics,x.y,Alice; Bob ;,None\n"
        "Dana,22\n",
        encoding="utf-8",
    )
    return path
