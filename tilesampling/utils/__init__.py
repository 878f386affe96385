"""
Common utilities, configuration and error types.
"""

# ============================================================================
# Configuration
# ============================================================================
from .config import (
    # Config functions
    default_cfg,
    load_cfg,

    # Sampler constants
    SEED_POINT,
    NONE_INDEX,
    PROBE_WINDOW,
    PACKING_SQRT,
    DEFAULT_NUM_PROBES,
    DEFAULT_SEED_RETRIES,

    # Config dictionary
    DEFAULT_CONFIG,
)

# ============================================================================
# Errors
# ============================================================================
from .errors import (
    TileSamplingError,
    PreconditionViolation,
    InvariantViolation,
)

# ============================================================================
# Utilities
# ============================================================================
from .utils import (
    ensure_torch,
    as_numpy,
    make_rng,
)


__all__ = [
    # Configuration
    "default_cfg",
    "load_cfg",

    # Constants
    "SEED_POINT",
    "NONE_INDEX",
    "PROBE_WINDOW",
    "PACKING_SQRT",
    "DEFAULT_NUM_PROBES",
    "DEFAULT_SEED_RETRIES",
    "DEFAULT_CONFIG",

    # Errors
    "TileSamplingError",
    "PreconditionViolation",
    "InvariantViolation",

    # Utilities - Conversion
    "ensure_torch",
    "as_numpy",

    # Utilities - Random
    "make_rng",
]
