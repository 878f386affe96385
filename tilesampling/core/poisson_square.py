"""
Tileable Poisson-disk sampling on the unit square.

Fills a fixed-capacity kernel with points that are pairwise at least
`min_dist` apart under the wrap-around metric, so the resulting pattern
tiles seamlessly.

    1. Seed the kernel with the centre of the square (0.5, 0.5).
    2. Pick a random active point a and draw `num_probes` probes in the
       annulus [d, 2d) around it, wrapped back into the unit square.
    3. Reject probes that the occupancy grid reports as too close to an
       accepted point.
    4. Accept the surviving probe nearest to a (toroidal distance, first in
       generation order on ties); if none survives, retire a.
    5. Stop when the active set is empty or the kernel is full.

Each round's probes are generated and tested as one numpy batch; shared
state (kernel, grid, active set) is mutated only after the batch.

Example:
    >>> from tilesampling import PointKernel, poisson_square
    >>> kernel = PointKernel(1024)
    >>> count = poisson_square(kernel, num_probes=30, seed=7)
    >>> points = kernel.head(count)
"""

import math
import numbers
import warnings
from typing import Dict, Optional

import numpy as np

from ..analysis.toroidal import toroidal_sq_dist, wrap_unit
from ..utils.config import (
    DEFAULT_NUM_PROBES,
    DEFAULT_SEED_RETRIES,
    PACKING_SQRT,
    SEED_POINT,
    default_cfg,
)
from ..utils.errors import PreconditionViolation
from ..utils.utils import make_rng
from .active_set import ActiveSet
from .kernel import PointKernel
from .occupancy import OccupancyGrid, grid_side


def default_min_dist(n: int) -> float:
    """Empirical packing estimate 1 / sqrt(n * sqrt(2)) for n points."""
    if not isinstance(n, numbers.Integral) or n < 1:
        raise PreconditionViolation(f"Kernel size must be a positive integer, got {n!r}")
    return 1.0 / math.sqrt(n * PACKING_SQRT)


def _check_preconditions(n: int, min_dist, num_probes, max_seed_retries):
    if n < 1:
        raise PreconditionViolation("Kernel must hold at least one point")
    if isinstance(min_dist, bool) or not isinstance(min_dist, numbers.Real):
        raise PreconditionViolation(f"min_dist must be a real number, got {min_dist!r}")
    if not (0.0 < min_dist < 1.0):
        raise PreconditionViolation(f"min_dist must lie in (0, 1), got {min_dist!r}")
    if isinstance(num_probes, bool) or not isinstance(num_probes, numbers.Integral) or num_probes < 1:
        raise PreconditionViolation(f"num_probes must be a positive integer, got {num_probes!r}")
    if (isinstance(max_seed_retries, bool) or not isinstance(max_seed_retries, numbers.Integral)
            or max_seed_retries < 1):
        raise PreconditionViolation(f"max_seed_retries must be a positive integer, got {max_seed_retries!r}")


def generate_probes(active: np.ndarray, min_dist: float, num_probes: int, rng: np.random.Generator) -> np.ndarray:
    """Draw probes uniformly in radius [d, 2d) and angle [0, 2pi), wrapped into [0, 1)^2."""
    r = rng.uniform(min_dist, 2.0 * min_dist, size=num_probes)
    theta = rng.uniform(0.0, 2.0 * np.pi, size=num_probes)

    probes = np.empty((num_probes, 2), dtype=np.float64)
    probes[:, 0] = active[0] + r * np.cos(theta)
    probes[:, 1] = active[1] + r * np.sin(theta)
    return wrap_unit(probes)


def rank_probes(active: np.ndarray, probes: np.ndarray, rejected: np.ndarray) -> np.ndarray:
    """Squared toroidal distance of each probe to `active`, -1 where rejected."""
    d2 = toroidal_sq_dist(probes, active)
    return np.where(rejected, -1.0, d2)


def select_nearest(dist2: np.ndarray) -> Optional[int]:
    """Index of the smallest non-negative entry (first on ties), or None."""
    valid = dist2 >= 0.0
    if not valid.any():
        return None
    return int(np.argmin(np.where(valid, dist2, np.inf)))


def poisson_square(
    kernel,
    min_dist: Optional[float] = None,
    num_probes: Optional[int] = None,
    seed=None,
    max_seed_retries: int = DEFAULT_SEED_RETRIES,
    verbose: bool = False
) -> int:
    """
    Fill `kernel` with a tileable Poisson-disk pattern.

    Accepts both `poisson_square(kernel, num_probes)` (min_dist derived from
    the kernel size) and `poisson_square(kernel, min_dist, num_probes)`.
    An integer second argument is read as the probe count, since no integer
    is a valid min_dist.

    Args:
        kernel: PointKernel, (N, 2) float numpy array or (N, 2) float tensor.
        min_dist: minimum toroidal distance in (0, 1); None uses default_min_dist(N).
        num_probes: probes per round (default 30).
        seed: None, int or numpy Generator.
        max_seed_retries: failing rounds tolerated on an active point that the
            retirement rule keeps alive (lone active point, k <= 1).
        verbose: print a one-line summary.

    Returns:
        Number of accepted points, stored in kernel[0:count]. Slots past
        count are left untouched.
    """
    if (num_probes is None and isinstance(min_dist, numbers.Integral)
            and not isinstance(min_dist, bool)):
        min_dist, num_probes = None, min_dist
    if num_probes is None:
        num_probes = DEFAULT_NUM_PROBES

    kern = PointKernel.wrap(kernel)
    n = len(kern)
    if min_dist is None and n >= 1:
        min_dist = default_min_dist(n)
    _check_preconditions(n, min_dist, num_probes, max_seed_retries)

    min_dist = float(min_dist)
    num_probes = int(num_probes)
    rng = make_rng(seed)
    grid = OccupancyGrid(min_dist)
    points = kern.points

    k = 0
    kern.write(k, SEED_POINT)
    grid.mark(points[k], k)

    actives = ActiveSet()
    actives.push(k)

    rounds = 0
    stalled = 0
    while actives and k < n - 1:
        rounds += 1
        slot = actives.pick(rng)
        active = np.array(points[actives.get(slot)], dtype=np.float64)

        probes = generate_probes(active, min_dist, num_probes, rng)
        # Test the values the buffer will hold, not the float64 draws
        probes = wrap_unit(probes.astype(points.dtype)).astype(np.float64)
        rejected = grid.collides_batch(probes, points)
        nearest = select_nearest(rank_probes(active, probes, rejected))

        if nearest is None:
            if len(actives) > 1 or k > 1:
                actives.remove(slot)
                continue

            # Lone active point that the retirement rule keeps; bound the retries
            stalled += 1
            if stalled >= max_seed_retries:
                warnings.warn(
                    f"poisson_square: point {actives.get(slot)} produced no valid probe in "
                    f"{stalled} rounds (min_dist={min_dist}); stopping with {k + 1} point(s)",
                    RuntimeWarning,
                    stacklevel=2,
                )
                actives.remove(slot)
            continue

        stalled = 0
        k += 1
        kern.write(k, probes[nearest])
        actives.push(k)
        grid.mark(points[k], k)

    count = k + 1
    kern.commit(count)

    if verbose:
        print(f"[poisson_square] placed {count}/{n} points "
              f"(min_dist={min_dist:.4f}, grid={grid.side}x{grid.side}, probes={num_probes}, rounds={rounds})")

    return count


def extract_config_params(cfg: Dict) -> Dict:
    """Extract config parameters; values are validated by poisson_square."""
    return {
        'num_probes': cfg.get("num_probes", DEFAULT_NUM_PROBES),
        'min_dist': cfg.get("min_dist"),
        'seed': cfg.get("seed"),
        'max_seed_retries': cfg.get("max_seed_retries", DEFAULT_SEED_RETRIES),
        'verbose': bool(cfg.get("verbose", False)),
    }


def synthesize_poisson_square(
    n: int,
    cfg: Optional[Dict] = None,
    seed=None,
    return_torch: bool = False,
    device='cpu'
) -> Dict:
    """
    Allocate a kernel of capacity `n`, sample it and return the accepted points.

    `seed` overrides cfg["seed"] when given.
    """
    params = extract_config_params(default_cfg() if cfg is None else cfg)
    if seed is None:
        seed = params['seed']

    kernel = PointKernel(n)
    min_dist = params['min_dist'] if params['min_dist'] is not None else default_min_dist(n)

    count = poisson_square(
        kernel,
        min_dist,
        params['num_probes'],
        seed=seed,
        max_seed_retries=params['max_seed_retries'],
        verbose=params['verbose'],
    )

    points = kernel.to_torch(device=device, count=count) if return_torch else kernel.head(count)

    debug = {
        "capacity": n,
        "fill_ratio": count / n,
        "grid_side": grid_side(min_dist),
    }

    return {
        "points": points,
        "count": count,
        "min_dist": min_dist,
        "num_probes": params['num_probes'],
        "debug": debug,
    }
