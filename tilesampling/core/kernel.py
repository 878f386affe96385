"""Fixed-capacity 2D point buffer consumed by the samplers."""

import numbers
from typing import Optional, Tuple

import numpy as np
import torch

from ..utils.errors import PreconditionViolation
from ..utils.utils import as_numpy, ensure_torch


def _check_shape(shape: Tuple[int, ...]):
    if len(shape) != 2 or shape[1] != 2:
        raise PreconditionViolation(f"Expected an (N, 2) point buffer, got shape {shape}")


class PointKernel:
    """
    Index-addressable sequence of N 2D points backed by an (N, 2) numpy array.

    A kernel either owns its storage or borrows the caller's buffer. Numpy
    arrays and contiguous CPU tensors are borrowed in place; other tensors are
    copied on wrap and only the accepted slots are copied back by commit().
    """

    def __init__(self, size: int, dtype=np.float64):
        if not isinstance(size, numbers.Integral) or size < 1:
            raise PreconditionViolation(f"Kernel size must be a positive integer, got {size!r}")
        self.points = np.zeros((int(size), 2), dtype=dtype)
        self._source = None

    @classmethod
    def wrap(cls, buffer) -> "PointKernel":
        """Adopt a caller-owned (N, 2) numpy array or torch tensor."""
        if isinstance(buffer, PointKernel):
            return buffer

        source = None
        if torch.is_tensor(buffer):
            _check_shape(tuple(buffer.shape))
            # Only dtypes numpy can hold exactly; the sampler tests stored values
            if buffer.dtype not in (torch.float16, torch.float32, torch.float64):
                raise PreconditionViolation(
                    f"Point buffer must be float16, float32 or float64, got {buffer.dtype}"
                )
            shares_memory = (
                buffer.device.type == "cpu"
                and buffer.is_contiguous()
                and not buffer.requires_grad
            )
            if shares_memory:
                points = buffer.numpy()
            else:
                points = as_numpy(buffer).copy()
                source = buffer
        elif isinstance(buffer, np.ndarray):
            _check_shape(buffer.shape)
            if not np.issubdtype(buffer.dtype, np.floating):
                raise PreconditionViolation(f"Point buffer must be floating point, got {buffer.dtype}")
            points = buffer
        else:
            raise PreconditionViolation(
                f"Point buffer must be a numpy array or torch tensor, got {type(buffer).__name__}"
            )

        kernel = cls.__new__(cls)
        kernel.points = points
        kernel._source = source
        return kernel

    def __len__(self) -> int:
        return self.points.shape[0]

    def read(self, i: int) -> Tuple[float, float]:
        x, y = self.points[i]
        return float(x), float(y)

    def write(self, i: int, point):
        self.points[i, 0] = point[0]
        self.points[i, 1] = point[1]

    __getitem__ = read
    __setitem__ = write

    def head(self, count: int) -> np.ndarray:
        """Copy of the first `count` points."""
        return self.points[:count].copy()

    def commit(self, count: Optional[int] = None):
        """Copy slots [0, count) back into a buffer that could not be shared."""
        if self._source is None:
            return
        count = len(self) if count is None else int(count)
        src = self._source
        with torch.no_grad():
            src[:count].copy_(torch.from_numpy(self.points[:count]).to(device=src.device, dtype=src.dtype))

    def to_torch(self, device='cpu', dtype=torch.float32, count: Optional[int] = None) -> torch.Tensor:
        count = len(self) if count is None else int(count)
        return ensure_torch(self.points[:count], device=device, dtype=dtype)

    def __repr__(self):
        return f"PointKernel(size={len(self)}, dtype={self.points.dtype})"
