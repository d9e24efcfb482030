"""Tests for filter coefficients."""

import math

import pytest
import torch

from dbwavelets.exceptions import ConfigurationError
from dbwavelets.wavelets.coefficients import (
    get_filter_coefficients,
    supported_orders,
)

testdata = [
    pytest.param(1, id="db1"),
    pytest.param(2, id="db2"),
    pytest.param(4, id="db4"),
    pytest.param(10, id="db10"),
]


def test_supported_orders() -> None:
    """Test that the usual orders are available."""
    orders = supported_orders()
    assert orders[0] == 1
    assert all(o in orders for o in range(1, 21))
    assert 0 not in orders


def test_db2_coefficients() -> None:
    """Test db2 against closed form coefficients."""
    s3 = math.sqrt(3)
    h = get_filter_coefficients(2)
    h_ref = torch.tensor(
        [(1 + s3) / 8, (3 + s3) / 8, (3 - s3) / 8, (1 - s3) / 8],
        dtype=h.dtype,
        device=h.device,
    )
    torch.testing.assert_close(h, h_ref, atol=1e-14, rtol=0)


@pytest.mark.parametrize(("order"), testdata)
def test_scaling_coefficients(order: int) -> None:
    """Test length and sum rules of scaling coefficients."""
    h = get_filter_coefficients(order)
    assert h.shape == (2 * order,)
    assert h.dtype == torch.float64
    torch.testing.assert_close(h.sum().item(), 1.0)
    torch.testing.assert_close(h[::2].sum().item(), 0.5)
    torch.testing.assert_close(h[1::2].sum().item(), 0.5)


@pytest.mark.parametrize(("order"), testdata)
def test_wavelet_coefficients(order: int) -> None:
    """Test the alternating flip between h and g."""
    h = get_filter_coefficients(order, is_scaling=True)
    g = get_filter_coefficients(order, is_scaling=False)
    k = torch.arange(2 * order, device=h.device)
    torch.testing.assert_close(g, (-1.0) ** k * h.flip(0))


@pytest.mark.parametrize(("order"), [0, -1, 39, 2.0, True])
def test_unsupported_order(order: int) -> None:
    """Test that unsupported orders are rejected."""
    with pytest.raises(ConfigurationError):
        get_filter_coefficients(order)
