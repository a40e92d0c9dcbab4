"""
Main entry point for the Longhorn Network.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from .models.student import Student
from .samples import sample_case_1
from .ui import (
    input_int_in_range,
    load_students_from_file,
    load_sample_case,
    show_students,
    show_social_graph,
    show_roommate_matching,
    show_referral_path,
    show_social_demo,
    plot_social_graph,
    run_sample_scenarios,
)


def main() -> None:
    """Main menu loop."""
    students: List[Student] = sample_case_1()
    last_path: Optional[List[Student]] = None

    while True:
        print("\n=== Longhorn Network ===")
        print(f"({len(students)} students loaded)")
        print("1) Load students from file")
        print("2) Load a built-in sample case")
        print("3) Show all students")
        print("4) Show social graph (adjacency list)")
        print("5) Run roommate matching")
        print("6) Find a referral path")
        print("7) Run friend request / chat demo")
        print("8) Plot social graph")
        print("9) Run all sample scenarios")
        print("10) Exit")

        choice = input_int_in_range("Choose (1-10): ", 1, 10)

        if choice == 1:
            loaded = load_students_from_file()
            if loaded is not None:
                students = loaded
                last_path = None
        elif choice == 2:
            students = load_sample_case()
            last_path = None
        elif choice == 3:
            show_students(students)
        elif choice == 4:
            show_social_graph(students)
        elif choice == 5:
            show_roommate_matching(students)
        elif choice == 6:
            last_path = show_referral_path(students) or last_path
        elif choice == 7:
            show_social_demo(students)
        elif choice == 8:
            plot_social_graph(students, highlight_path=last_path)
        elif choice == 9:
            run_sample_scenarios()
        else:
            print("Goodbye!")
            break


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting...")
        sys.exit(0)
