"""
Scoring and roommate matching for the Longhorn Network.
"""

from .scoring import (
    ScoreStrategy,
    UniversityScoreStrategy,
    SCORE_STRATEGIES,
    register_score_strategy,
    compute_score_components,
    compute_connection_strength,
    build_edge_weights_for_population,
)
from .roommates import (
    assign_roommates,
    roommate_pairs,
    find_blocking_pairs,
)

__all__ = [
    "ScoreStrategy",
    "UniversityScoreStrategy",
    "SCORE_STRATEGIES",
    "register_score_strategy",
    "compute_score_components",
    "compute_connection_strength",
    "build_edge_weights_for_population",
    "assign_roommates",
    "roommate_pairs",
    "find_blocking_pairs",
]
