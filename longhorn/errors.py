"""
Exceptions raised by the Longhorn Network.

"No result" outcomes (unknown students, unreachable companies) are reported
through empty return values, never through these.
"""


class LonghornError(Exception):
    """Base class for all Longhorn Network errors."""
    pass


class InvalidInputError(LonghornError, ValueError):
    """Raised when a caller violates a precondition (missing start, blank company)."""
    pass


class InvalidPopulationError(InvalidInputError):
    """Raised when a population is None, holds non-students, or repeats a name."""
    pass


class SocialTaskTimeout(LonghornError):
    """Raised when the friend/chat demo does not finish before its deadline."""
    pass
