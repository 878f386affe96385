"""Error types raised by the sampler."""


class TileSamplingError(Exception):
    """Base class for all sampler errors."""


class PreconditionViolation(TileSamplingError, ValueError):
    """Invalid arguments from the caller; raised before any work is done."""


class InvariantViolation(TileSamplingError, AssertionError):
    """Internal consistency check failed. Indicates a bug, not bad input."""
