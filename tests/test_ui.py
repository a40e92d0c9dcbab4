"""
Tests for the CLI views and graph plotting.
"""

import pytest
import matplotlib.pyplot as plt

from longhorn.graph import SocialGraph
from longhorn.matching import assign_roommates
from longhorn.referral import find_referral_path
from longhorn.ui import (
    draw_social_graph,
    input_int_in_range,
    load_students_from_file,
    run_sample_scenarios,
    show_referral_path,
    show_roommate_matching,
    show_social_graph,
)


def feed(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


class TestHelpers:
    """Test input helpers."""

    def test_int_in_range_retries(self, monkeypatch, capsys):
        feed(monkeypatch, "abc", "42", "3")
        assert input_int_in_range("> ", 1, 10) == 3
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "between 1 and 10" in out


class TestViews:
    """Test menu actions."""

    def test_show_social_graph(self, case2, capsys):
        show_social_graph(case2)
        out = capsys.readouterr().out
        assert "Greg -> Helen(7), Ivy(6)" in out
        assert "Greg  [0 7 6]" in out
        assert "Ivy   [6 6 0]" in out
        assert "Strongest connection: Greg <-> Helen (7)" in out

    def test_show_social_graph_empty(self, capsys):
        show_social_graph([])
        out = capsys.readouterr().out
        assert "(empty)" in out
        assert "matrix" not in out

    def test_load_students_from_file(self, student_file, monkeypatch, capsys):
        feed(monkeypatch, str(student_file))
        students = load_students_from_file()
        assert [s.name for s in students] == ["Alice", "Bob", "Charlie", "Dana"]
        assert "Loaded 4 students." in capsys.readouterr().out

    def test_load_file_with_duplicate_names(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "dupes.txt"
        path.write_text(
            "Alice,20,Female,2,Computer Science,3.5,Bob,Google\n"
            "Bob,21,Male,3,Computer Science,3.7,Alice,None\n"
            "Alice,20,Female,2,Computer Science,3.5,Bob,Google\n",
            encoding="utf-8",
        )
        feed(monkeypatch, str(path))
        assert load_students_from_file() is None
        out = capsys.readouterr().out
        assert "Invalid student file" in out
        assert "Alice" in out
        assert "Loaded" not in out

    def test_load_missing_file(self, tmp_path, monkeypatch, capsys):
        feed(monkeypatch, str(tmp_path / "nope.txt"))
        assert load_students_from_file() is None
        assert "Failed to load students" in capsys.readouterr().out

    def test_show_roommate_matching(self, case3, capsys):
        show_roommate_matching(case3)
        out = capsys.readouterr().out
        assert "Jack <--> Kim" in out
        assert "Unmatched: Leo" in out
        assert "stable" in out

    def test_show_referral_path(self, case2, monkeypatch, capsys):
        feed(monkeypatch, "greg", "DummyCompany")
        path = show_referral_path(case2)
        assert [s.name for s in path][-1] == "Ivy"
        assert "Referral path: Greg" in capsys.readouterr().out

    def test_show_referral_path_blank_company(self, case2, monkeypatch, capsys):
        feed(monkeypatch, "Greg", "")
        assert show_referral_path(case2) is None
        assert "Invalid input" in capsys.readouterr().out

    def test_run_sample_scenarios(self, capsys):
        run_sample_scenarios()
        out = capsys.readouterr().out
        assert "Sample Case 3" in out
        assert "Referral path to DummyCompany: Greg" in out


class TestMainMenu:
    """Drive the menu loop end to end."""

    def test_load_sample_match_and_exit(self, monkeypatch, capsys):
        from longhorn.main import main

        feed(monkeypatch, "2", "3", "3", "5", "10")
        main()
        out = capsys.readouterr().out
        assert "Leo" in out
        assert "Jack <--> Kim" in out
        assert "Goodbye!" in out


class TestVisualization:
    """Headless plotting smoke tests."""

    def teardown_method(self):
        plt.close("all")

    def test_draw_with_roommates_and_path(self, case2, tmp_path):
        assign_roommates(case2)
        graph = SocialGraph(case2)
        path = find_referral_path(graph, case2[0], "DummyCompany")
        out = tmp_path / "graph.png"
        fig = draw_social_graph(graph, highlight_path=path, show=False, save_path=str(out))
        assert fig is not None
        assert out.exists()

    def test_draw_empty_graph(self, capsys):
        assert draw_social_graph(SocialGraph(), show=False) is None
        assert "No students" in capsys.readouterr().out
