"""
Social graph for the Longhorn Network.
"""

from .social_graph import SocialGraph

__all__ = ["SocialGraph"]
