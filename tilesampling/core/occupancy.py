"""Occupancy grid for toroidal min-distance queries on the unit square."""

import math
from typing import Tuple

import numpy as np

from ..utils.config import NONE_INDEX, PROBE_WINDOW
from ..utils.errors import InvariantViolation, PreconditionViolation
from .kernel import PointKernel


def grid_side(min_dist: float) -> int:
    """Cells per axis; ceil keeps every cell diagonal below min_dist."""
    return int(math.ceil(math.sqrt(2.0) / min_dist))


def window_offsets(radius: int = PROBE_WINDOW) -> np.ndarray:
    """(di, dj) cell offsets of the (2r+1)^2 window minus its four outer corners."""
    # Corner cells are only >= sqrt(2) / S away, and sqrt(2) / S <= min_dist;
    # a point there can lie marginally inside min_dist and go unseen.
    offsets = [
        (di, dj)
        for dj in range(-radius, radius + 1)
        for di in range(-radius, radius + 1)
        if not (abs(di) == radius and abs(dj) == radius)
    ]
    return np.array(offsets, dtype=np.int64)


class OccupancyGrid:
    """
    S x S grid over the unit torus mapping each cell to at most one point index.

    With S = ceil(sqrt(2) / min_dist) every cell diagonal is shorter than
    min_dist, so two accepted points can never share a cell. Any point within
    min_dist of a probe lies at most two cells away (Chebyshev). The four
    outer corners of that 5x5 window are skipped, leaving 21 cells.
    """

    def __init__(self, min_dist: float):
        if not min_dist > 0.0:
            raise PreconditionViolation(f"min_dist must be positive, got {min_dist!r}")
        self.min_dist = float(min_dist)
        self.dist2 = self.min_dist * self.min_dist
        self.side = grid_side(self.min_dist)
        self.cells = np.full((self.side, self.side), NONE_INDEX, dtype=np.int64)
        self._offsets = window_offsets()
        self._marked = 0

    @property
    def occupied(self) -> int:
        return self._marked

    def cell_of(self, point) -> Tuple[int, int]:
        """(cx, cy) of the cell containing point, clamped into the grid."""
        s = self.side
        cx = min(max(int(math.floor(point[0] * s)), 0), s - 1)
        cy = min(max(int(math.floor(point[1] * s)), 0), s - 1)
        return cx, cy

    def cells_of(self, points: np.ndarray) -> np.ndarray:
        """Vectorised cell_of for an (M, 2) array; returns (M, 2) int64 [cx, cy]."""
        c = np.floor(points * self.side).astype(np.int64)
        return np.clip(c, 0, self.side - 1)

    def index_at(self, cx: int, cy: int) -> int:
        return int(self.cells[cy % self.side, cx % self.side])

    def mark(self, point, k: int):
        cx, cy = self.cell_of(point)
        held = self.cells[cy, cx]
        if held != NONE_INDEX:
            raise InvariantViolation(
                f"Cell ({cx}, {cy}) already holds point {int(held)}; cannot mark point {k}"
            )
        self.cells[cy, cx] = k
        self._marked += 1

    def collides(self, probe, points) -> bool:
        """True if any marked point lies strictly within min_dist of probe."""
        return bool(self.collides_batch(np.asarray(probe, dtype=np.float64)[None, :], points)[0])

    def collides_batch(self, probes, points) -> np.ndarray:
        """
        Evaluate the collision test for an (M, 2) array of probes.

        Neighbouring cells are wrapped onto the torus; the point found there
        is shifted by one tile toward the probe before measuring the
        Euclidean distance. The grid is only read.
        """
        if isinstance(points, PointKernel):
            points = points.points
        P = np.asarray(probes, dtype=np.float64).reshape(-1, 2)
        s = self.side

        c = self.cells_of(P)
        ii = c[:, 0:1] + self._offsets[None, :, 0]
        jj = c[:, 1:2] + self._offsets[None, :, 1]

        idx = self.cells[jj % s, ii % s]
        occupied = idx != NONE_INDEX
        if not occupied.any():
            return np.zeros(P.shape[0], dtype=bool)

        cand = np.asarray(points)[np.where(occupied, idx, 0)].astype(np.float64)
        shift_x = np.where(ii < 0, -1.0, np.where(ii >= s, 1.0, 0.0))
        shift_y = np.where(jj < 0, -1.0, np.where(jj >= s, 1.0, 0.0))

        dx = cand[..., 0] + shift_x - P[:, 0:1]
        dy = cand[..., 1] + shift_y - P[:, 1:2]
        hit = occupied & (dx * dx + dy * dy < self.dist2)
        return hit.any(axis=1)

    def __repr__(self):
        return f"OccupancyGrid(min_dist={self.min_dist}, side={self.side}, occupied={self._marked})"
