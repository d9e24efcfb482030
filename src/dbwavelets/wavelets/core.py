"""Daubechies scaling and wavelet functions sampled on a grid."""

from __future__ import annotations

import torch

from dbwavelets.exceptions import InternalConsistencyError
from dbwavelets.grid import WaveletGrid
from dbwavelets.logging import getLogger
from dbwavelets.specs import defaults
from dbwavelets.wavelets.cascade import DyadicValues, cascade
from dbwavelets.wavelets.coefficients import (
    get_filter_coefficients,
    validate_order,
)
from dbwavelets.wavelets.eigen import compute_integer_values
from dbwavelets.wavelets.matrices import build_transfer_matrices
from dbwavelets.wavelets.sizing import GridSizing

logger = getLogger(__name__)

POSITION_LABEL = "position"


def grid_name(order: int, *, do_wavelet: bool) -> str:
    """Name of the grid, db<order>_phi or db<order>_psi."""
    return f"db{order}_{'psi' if do_wavelet else 'phi'}"


def grid_cell_indices(
    depth: int,
    n_translates: int,
    *,
    device: torch.device | None = None,
) -> torch.Tensor:
    """Grid cells matching dyadic addresses and integer translates.

    Address dec of depth d and translate i map to the cell
    dec * (bins_per_int >> d) + bins_per_int * i, with bins_per_int = 2**d.

    Args:
        depth (int): Depth of the addresses.
        n_translates (int): Number of integer translates.
        device (torch.device | None, optional): Device. Defaults to None.

    Returns:
        torch.Tensor: (2**depth, n_translates)-shaped cell indices.
    """
    device = defaults.get_device(device)
    bins_per_int = 1 << depth
    dec = torch.arange(bins_per_int, device=device)
    translates = torch.arange(n_translates, device=device)
    first_cell = dec * (bins_per_int >> depth)
    return first_cell[:, None] + bins_per_int * translates[None, :]


def fill_grid(
    grid: WaveletGrid,
    values: DyadicValues,
    derivs: DyadicValues,
) -> None:
    """Fill a grid with cascade results.

    Args:
        grid (WaveletGrid): Grid to fill, with maxsupport * 2**depth bins.
        values (DyadicValues): Values.
        derivs (DyadicValues): Derivatives.

    Raises:
        InternalConsistencyError: If values and derivatives addresses
            mismatch, or if the grid is not covered exactly once.
    """
    if values.depth != derivs.depth or values.values.shape != (
        derivs.values.shape
    ):
        msg = (
            "Values and derivatives addresses mismatch: "
            f"depth {values.depth} with shape {tuple(values.values.shape)} "
            f"vs depth {derivs.depth} with shape {tuple(derivs.values.shape)}."
        )
        raise InternalConsistencyError(msg)
    cells = grid_cell_indices(
        values.depth,
        values.n_translates,
        device=values.values.device,
    )
    grid.set_values_and_derivatives(
        cells.flatten(),
        values.values.flatten(),
        derivs.values.flatten()[:, None],
    )
    grid.check_coverage()


def build_wavelet_grid(
    order: int,
    gridsize: int,
    do_wavelet: bool = False,  # noqa: FBT001, FBT002
    *,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> WaveletGrid:
    """Sample a Daubechies function and its derivative on a grid.

    The grid covers [0, 2*order - 1) with 2**r bins per unit interval, r
    being the smallest integer giving at least `gridsize` bins.

    Args:
        order (int): Wavelet order.
        gridsize (int): Minimal number of bins.
        do_wavelet (bool, optional): Sample the wavelet function instead of
            the scaling function. Defaults to False.
        dtype (torch.dtype | None, optional): Dtype. Defaults to None.
        device (torch.device | None, optional): Device. Defaults to None.

    Returns:
        WaveletGrid: Filled grid.
    """
    validate_order(order)
    sizing = GridSizing.from_request(order, gridsize)
    specs = defaults.get(dtype=dtype, device=device)
    name = grid_name(order, do_wavelet=do_wavelet)

    with logger.section(f"Building {name} grid..."):
        logger.detail(
            f"{sizing.gridsize} bins over [0, {sizing.maxsupport}), "
            f"recursion number: {sizing.recursion_number}"
        )
        h_coeffs = get_filter_coefficients(order, is_scaling=True, **specs)
        h_matrices = build_transfer_matrices(h_coeffs)
        g_matrices = None
        if do_wavelet:
            g_coeffs = get_filter_coefficients(order, is_scaling=False, **specs)
            g_matrices = build_transfer_matrices(g_coeffs)

        values_at_integers = compute_integer_values(h_matrices.m0, 0)
        derivs_at_integers = compute_integer_values(h_matrices.m0, 1)

        with logger.timeit("Cascade"):
            values = cascade(
                h_matrices,
                values_at_integers,
                sizing.recursion_number,
                deriv=0,
                g_matrices=g_matrices,
            )
            derivs = cascade(
                h_matrices,
                derivs_at_integers,
                sizing.recursion_number,
                deriv=1,
                g_matrices=g_matrices,
            )

        grid = WaveletGrid(
            name,
            POSITION_LABEL,
            0,
            sizing.maxsupport,
            sizing.gridsize,
            periodic=False,
            **specs,
        )
        fill_grid(grid, values, derivs)
    return grid
