"""
Longhorn Network - Main package.

Models a student population as a weighted social graph and provides
connection scoring, stable roommate matching and referral path search.
"""

from .config import (
    DATA_FILE,
    NO_INTERNSHIP_TOKEN,
    ROOMMATE_PREF_BONUS,
    SHARED_INTERNSHIP_BONUS,
    SAME_MAJOR_BONUS,
    SAME_AGE_BONUS,
)

from .errors import (
    LonghornError,
    InvalidInputError,
    InvalidPopulationError,
    SocialTaskTimeout,
)

from .models import Student, GraphEdge, Population, validate_population

from .matching import (
    ScoreStrategy,
    UniversityScoreStrategy,
    register_score_strategy,
    compute_score_components,
    compute_connection_strength,
    build_edge_weights_for_population,
    assign_roommates,
    roommate_pairs,
    find_blocking_pairs,
)

from .graph import SocialGraph

from .referral import ReferralPathFinder, find_referral_path

from .loader import parse_students, load_population

from .social import send_friend_request, send_chat_message, run_social_demo

from .samples import sample_case_1, sample_case_2, sample_case_3, SAMPLE_CASES

__all__ = [
    # Config
    "DATA_FILE",
    "NO_INTERNSHIP_TOKEN",
    "ROOMMATE_PREF_BONUS",
    "SHARED_INTERNSHIP_BONUS",
    "SAME_MAJOR_BONUS",
    "SAME_AGE_BONUS",
    # Errors
    "LonghornError",
    "InvalidInputError",
    "InvalidPopulationError",
    "SocialTaskTimeout",
    # Models
    "Student",
    "GraphEdge",
    "Population",
    "validate_population",
    # Matching
    "ScoreStrategy",
    "UniversityScoreStrategy",
    "register_score_strategy",
    "compute_score_components",
    "compute_connection_strength",
    "build_edge_weights_for_population",
    "assign_roommates",
    "roommate_pairs",
    "find_blocking_pairs",
    # Graph
    "SocialGraph",
    # Referral
    "ReferralPathFinder",
    "find_referral_path",
    # Loader
    "parse_students",
    "load_population",
    # Social
    "send_friend_request",
    "send_chat_message",
    "run_social_demo",
    # Samples
    "sample_case_1",
    "sample_case_2",
    "sample_case_3",
    "SAMPLE_CASES",
]
