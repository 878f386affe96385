"""
Toroidal metric helpers.

Includes:
- Wrapping coordinates into the unit tile
- Toroidal distances (closed form and by explicit tile translation)
- Pairwise minimum-distance checks for sampled point sets
"""

from .toroidal import (
    wrap_unit,
    toroidal_delta,
    toroidal_sq_dist,
    toroidal_sq_dist_by_translation,
    pairwise_toroidal_sq_dist,
    min_toroidal_distance,
    check_min_distance,
    wrap_crossing_pairs,
)

__all__ = [
    # Wrapping
    "wrap_unit",

    # Distances
    "toroidal_delta",
    "toroidal_sq_dist",
    "toroidal_sq_dist_by_translation",
    "pairwise_toroidal_sq_dist",

    # Checks
    "min_toroidal_distance",
    "check_min_distance",
    "wrap_crossing_pairs",
]
