"""
tilesampling - Tileable Low-Discrepancy Point Sampling

Fills fixed-capacity 2D point kernels on the unit square with Poisson-disk
patterns that wrap around at the edges, so the unit tile can be repeated
without seams.

Components:
    - Core: Point kernel, occupancy grid, active set, Poisson-square sampler
    - Analysis: Toroidal wrapping and distance checks
    - Utils: Configuration, errors and conversion helpers

Example:
    >>> from tilesampling import default_cfg, synthesize_poisson_square
    >>>
    >>> cfg = default_cfg()
    >>> cfg["num_probes"] = 30
    >>>
    >>> result = synthesize_poisson_square(1024, cfg, seed=7)
    >>> points = result["points"]    # (count, 2) in [0, 1)^2
    >>> count = result["count"]
"""

__version__ = "1.0.0"

# ============================================================================
# Core Sampling
# ============================================================================
from .core import (
    # Kernel
    PointKernel,

    # Occupancy grid
    OccupancyGrid,
    grid_side,
    window_offsets,

    # Active set
    ActiveSet,

    # Poisson square
    poisson_square,
    synthesize_poisson_square,
    default_min_dist,
    generate_probes,
    rank_probes,
    select_nearest,
    extract_config_params,
)

# ============================================================================
# Analysis
# ============================================================================
from .analysis import (
    wrap_unit,
    toroidal_delta,
    toroidal_sq_dist,
    toroidal_sq_dist_by_translation,
    pairwise_toroidal_sq_dist,
    min_toroidal_distance,
    check_min_distance,
    wrap_crossing_pairs,
)

# ============================================================================
# Utils
# ============================================================================
from .utils import (
    # Configuration
    default_cfg,
    load_cfg,

    # Constants
    SEED_POINT,
    NONE_INDEX,
    PROBE_WINDOW,
    PACKING_SQRT,
    DEFAULT_NUM_PROBES,
    DEFAULT_SEED_RETRIES,
    DEFAULT_CONFIG,

    # Errors
    TileSamplingError,
    PreconditionViolation,
    InvariantViolation,

    # Utilities
    ensure_torch,
    as_numpy,
    make_rng,
)


__all__ = [
    "__version__",

    # ========================================================================
    # Core - Kernel, grid, active set
    # ========================================================================
    "PointKernel",
    "OccupancyGrid",
    "grid_side",
    "window_offsets",
    "ActiveSet",

    # ========================================================================
    # Core - Poisson square
    # ========================================================================
    "poisson_square",
    "synthesize_poisson_square",
    "default_min_dist",
    "generate_probes",
    "rank_probes",
    "select_nearest",
    "extract_config_params",

    # ========================================================================
    # Analysis - Toroidal metric
    # ========================================================================
    "wrap_unit",
    "toroidal_delta",
    "toroidal_sq_dist",
    "toroidal_sq_dist_by_translation",
    "pairwise_toroidal_sq_dist",
    "min_toroidal_distance",
    "check_min_distance",
    "wrap_crossing_pairs",

    # ========================================================================
    # Utils - Configuration
    # ========================================================================
    "default_cfg",
    "load_cfg",
    "SEED_POINT",
    "NONE_INDEX",
    "PROBE_WINDOW",
    "PACKING_SQRT",
    "DEFAULT_NUM_PROBES",
    "DEFAULT_SEED_RETRIES",
    "DEFAULT_CONFIG",

    # ========================================================================
    # Utils - Errors
    # ========================================================================
    "TileSamplingError",
    "PreconditionViolation",
    "InvariantViolation",

    # ========================================================================
    # Utils - Utilities
    # ========================================================================
    "ensure_torch",
    "as_numpy",
    "make_rng",
]
