"""Daubechies filter coefficients.

Coefficients are read from PyWavelets' reconstruction filters and rescaled
so that the scaling filter sums to 1:

    φ(x) = Σ 2 h[k] φ(2x - k)
    ψ(x) = Σ 2 g[k] φ(2x - k),    g[k] = (-1)^k h[2p - 1 - k]

where p is the order of the wavelet.
"""

from __future__ import annotations

import math
from functools import cache

import pywt
import torch

from dbwavelets.exceptions import ConfigurationError
from dbwavelets.specs import defaults

FAMILY = "db"


@cache
def supported_orders() -> tuple[int, ...]:
    """Orders available from the coefficient tables.

    Returns:
        tuple[int, ...]: Sorted orders.
    """
    names = pywt.wavelist(family=FAMILY, kind="discrete")
    return tuple(sorted(int(name.removeprefix(FAMILY)) for name in names))


def validate_order(order: int) -> None:
    """Check that a wavelet order can be used.

    Args:
        order (int): Wavelet order.

    Raises:
        ConfigurationError: If the order is not a supported integer.
    """
    if isinstance(order, bool) or not isinstance(order, int):
        msg = f"Wavelet order must be an integer, not {type(order).__name__}."
        raise ConfigurationError(msg)
    if order not in supported_orders():
        orders = supported_orders()
        msg = (
            f"Unsupported wavelet order: {order}. "
            f"Available orders range from {orders[0]} to {orders[-1]}."
        )
        raise ConfigurationError(msg)


def get_filter_coefficients(
    order: int,
    *,
    is_scaling: bool = True,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """Filter coefficients of the Daubechies wavelet of a given order.

    Args:
        order (int): Wavelet order, the filters have 2*order taps.
        is_scaling (bool, optional): Whether to return the scaling filter h
            or the wavelet filter g. Defaults to True.
        dtype (torch.dtype | None, optional): Dtype. Defaults to None.
        device (torch.device | None, optional): Device. Defaults to None.

    Returns:
        torch.Tensor: (2*order,)-shaped coefficients.
    """
    validate_order(order)
    wavelet = pywt.Wavelet(f"{FAMILY}{order}")
    coefs = wavelet.rec_lo if is_scaling else wavelet.rec_hi
    return torch.tensor(
        coefs,
        **defaults.get(dtype=dtype, device=device),
    ) / math.sqrt(2)
