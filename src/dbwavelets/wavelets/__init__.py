"""Daubechies wavelets on grids, computed with the cascade algorithm."""

from dbwavelets.wavelets.coefficients import (
    get_filter_coefficients,
    supported_orders,
)
from dbwavelets.wavelets.core import build_wavelet_grid
from dbwavelets.wavelets.sizing import GridSizing

__all__ = [
    "GridSizing",
    "build_wavelet_grid",
    "get_filter_coefficients",
    "supported_orders",
]
