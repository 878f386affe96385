"""
Core sampling operations.

Includes:
- Point kernel (fixed-capacity 2D point buffer)
- Occupancy grid with toroidal neighbourhood queries
- Active front bookkeeping
- Tileable Poisson-disk sampler driver
"""

# ============================================================================
# Point Kernel
# ============================================================================
from .kernel import PointKernel

# ============================================================================
# Occupancy Grid
# ============================================================================
from .occupancy import (
    OccupancyGrid,
    grid_side,
    window_offsets,
)

# ============================================================================
# Active Set
# ============================================================================
from .active_set import ActiveSet

# ============================================================================
# Poisson Square
# ============================================================================
from .poisson_square import (
    # Main entry points
    poisson_square,
    synthesize_poisson_square,
    default_min_dist,

    # Round helpers
    generate_probes,
    rank_probes,
    select_nearest,
    extract_config_params,
)


__all__ = [
    # Kernel
    "PointKernel",

    # Occupancy grid
    "OccupancyGrid",
    "grid_side",
    "window_offsets",

    # Active set
    "ActiveSet",

    # Poisson square - Main
    "poisson_square",
    "synthesize_poisson_square",
    "default_min_dist",

    # Poisson square - Helpers
    "generate_probes",
    "rank_probes",
    "select_nearest",
    "extract_config_params",
]
