"""Common utility functions."""

import numbers

import numpy as np
import torch


def ensure_torch(x, device='cpu', dtype=torch.float32):
    """Convert array-like to torch tensor on the given device/dtype."""
    if torch.is_tensor(x):
        if x.device == torch.device(device) and x.dtype == dtype:
            return x
        return x.to(device=device, dtype=dtype)
    return torch.from_numpy(np.ascontiguousarray(x)).to(device=device, dtype=dtype)


def as_numpy(a):
    """Convert to numpy array."""
    if isinstance(a, torch.Tensor):
        return a.detach().cpu().numpy()
    return np.asarray(a)


def make_rng(seed=None) -> np.random.Generator:
    """
    Build a numpy Generator.

    None draws fresh OS entropy, an int gives a reproducible stream, and an
    existing Generator is passed through so callers can share one stream
    across several sampler runs.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is not None and not isinstance(seed, numbers.Integral):
        raise TypeError(f"seed must be None, an int or a numpy Generator, got {type(seed).__name__}")
    return np.random.default_rng(seed)
