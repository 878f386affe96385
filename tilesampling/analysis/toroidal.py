"""Wrap-around geometry on the unit torus [0, 1)^2."""

import numpy as np

# The nine tile translations t in {-1, 0, 1}^2
_TILE_SHIFTS = np.array([(tx, ty) for ty in (-1.0, 0.0, 1.0) for tx in (-1.0, 0.0, 1.0)])


def wrap_unit(v):
    """Map coordinates into [0, 1). Values that round up to 1.0 become 0.0."""
    v = np.mod(v, 1.0)
    return np.where(v >= 1.0, 0.0, v)


def toroidal_delta(p, q) -> np.ndarray:
    """Component-wise distance between p and q along the shorter way around."""
    d = np.abs(np.asarray(p, dtype=np.float64) - np.asarray(q, dtype=np.float64))
    return np.minimum(d, 1.0 - d)


def toroidal_sq_dist(p, q) -> np.ndarray:
    """Squared toroidal distance; broadcasts over leading dimensions."""
    d = toroidal_delta(p, q)
    return np.sum(d * d, axis=-1)


def toroidal_sq_dist_by_translation(p, q) -> np.ndarray:
    """min over t in {-1,0,1}^2 of |p - q + t|^2, evaluated literally."""
    diff = np.asarray(p, dtype=np.float64) - np.asarray(q, dtype=np.float64)
    shifted = diff[..., None, :] + _TILE_SHIFTS
    return np.min(np.sum(shifted * shifted, axis=-1), axis=-1)


def pairwise_toroidal_sq_dist(points) -> np.ndarray:
    """(K, K) matrix of squared toroidal distances with an inf diagonal."""
    P = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    d2 = toroidal_sq_dist(P[:, None, :], P[None, :, :])
    np.fill_diagonal(d2, np.inf)
    return d2


def min_toroidal_distance(points) -> float:
    """Smallest pairwise toroidal distance, inf for fewer than two points."""
    P = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if P.shape[0] < 2:
        return float("inf")
    return float(np.sqrt(pairwise_toroidal_sq_dist(P).min()))


def check_min_distance(points, min_dist: float, atol: float = 1e-12) -> bool:
    """True when every pair is at least min_dist apart on the torus."""
    P = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if P.shape[0] < 2:
        return True
    return bool(pairwise_toroidal_sq_dist(P).min() >= min_dist * min_dist - atol)


def wrap_crossing_pairs(points) -> np.ndarray:
    """
    Index pairs (i < j) whose nearest images lie across a tile edge.

    For such pairs |dx| > 0.5 or |dy| > 0.5, so the plain Euclidean distance
    overestimates the toroidal one.
    """
    P = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    d = np.abs(P[:, None, :] - P[None, :, :])
    crossing = np.any(d > 0.5, axis=-1)
    return np.argwhere(np.triu(crossing, k=1))
