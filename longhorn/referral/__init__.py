"""
Referral path search for the Longhorn Network.
"""

from .path_finder import ReferralPathFinder, find_referral_path, edge_cost

__all__ = ["ReferralPathFinder", "find_referral_path", "edge_cost"]
