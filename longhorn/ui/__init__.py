"""
User interface for the Longhorn Network.
"""

from .helpers import input_int_in_range, input_text
from .views import (
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
from .visualization import draw_social_graph

__all__ = [
    "input_int_in_range",
    "input_text",
    "load_students_from_file",
    "load_sample_case",
    "show_students",
    "show_social_graph",
    "show_roommate_matching",
    "show_referral_path",
    "show_social_demo",
    "plot_social_graph",
    "run_sample_scenarios",
    "draw_social_graph",
]
