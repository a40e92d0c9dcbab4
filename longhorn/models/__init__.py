"""
Data models for the Longhorn Network.
"""

from .student import Student, is_real_internship
from .edge import GraphEdge
from .population import Population, validate_population

__all__ = ["Student", "is_real_internship", "GraphEdge", "Population", "validate_population"]
