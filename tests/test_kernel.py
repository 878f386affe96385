import numpy as np
import pytest
import torch

from tilesampling.core.kernel import PointKernel
from tilesampling.utils.errors import PreconditionViolation


def test_owned_kernel_read_write():
    kernel = PointKernel(4)
    assert len(kernel) == 4
    kernel.write(2, (0.25, 0.75))
    assert kernel.read(2) == (0.25, 0.75)
    kernel[3] = np.array([0.1, 0.2])
    assert kernel[3] == pytest.approx((0.1, 0.2))
    assert kernel.head(2).shape == (2, 2)


@pytest.mark.parametrize("size", [0, -3, 2.5])
def test_invalid_size(size):
    with pytest.raises(PreconditionViolation):
        PointKernel(size)


def test_wrap_numpy_is_in_place():
    buf = np.zeros((8, 2))
    kernel = PointKernel.wrap(buf)
    kernel.write(0, (0.5, 0.5))
    assert buf[0].tolist() == [0.5, 0.5]
    assert PointKernel.wrap(kernel) is kernel


def test_wrap_cpu_tensor_shares_memory():
    t = torch.zeros(8, 2, dtype=torch.float32)
    kernel = PointKernel.wrap(t)
    kernel.write(1, (0.25, 0.125))
    assert t[1].tolist() == [0.25, 0.125]


def test_wrap_grad_tensor_is_copied_until_commit():
    t = torch.full((4, 2), -1.0, dtype=torch.float32, requires_grad=True)
    kernel = PointKernel.wrap(t)
    kernel.write(0, (0.5, 0.5))
    kernel.write(1, (0.25, 0.25))
    assert t[0].tolist() == [-1.0, -1.0]

    kernel.commit(1)
    assert t[0].tolist() == [0.5, 0.5]
    assert t[1].tolist() == [-1.0, -1.0]


@pytest.mark.parametrize("buf", [
    np.zeros((4, 3)),
    np.zeros(8),
    np.zeros((4, 2), dtype=np.int64),
    [[0.0, 0.0], [0.1, 0.1]],
    torch.zeros(4, 2, dtype=torch.int32),
])
def test_wrap_rejects_bad_buffers(buf):
    with pytest.raises(PreconditionViolation):
        PointKernel.wrap(buf)


def test_to_torch():
    kernel = PointKernel(3)
    kernel.write(0, (0.5, 0.5))
    t = kernel.to_torch(count=1)
    assert t.dtype == torch.float32
    assert tuple(t.shape) == (1, 2)


def test_wrap_half_tensor_copy_keeps_dtype():
    t = torch.zeros(4, 2, dtype=torch.float16, requires_grad=True)
    kernel = PointKernel.wrap(t)
    assert kernel.points.dtype == np.float16
    kernel.write(0, (0.5, 0.25))
    kernel.commit(1)
    assert t[0].tolist() == [0.5, 0.25]


def test_wrap_rejects_bfloat16():
    with pytest.raises(PreconditionViolation):
        PointKernel.wrap(torch.zeros(4, 2, dtype=torch.bfloat16))
