"""Tests for wavelet grids."""

import pytest
import torch

from dbwavelets.exceptions import (
    ConfigurationError,
    InternalConsistencyError,
    NumericalError,
)
from dbwavelets.grid import WaveletGrid
from dbwavelets.specs import defaults
from dbwavelets.wavelets import build_wavelet_grid
from dbwavelets.wavelets.cascade import DyadicValues
from dbwavelets.wavelets.coefficients import get_filter_coefficients
from dbwavelets.wavelets.core import fill_grid, grid_cell_indices
from dbwavelets.wavelets.eigen import compute_integer_values
from dbwavelets.wavelets.matrices import build_transfer_matrices
from dbwavelets.wavelets.sizing import GridSizing

specs = defaults.get()

coverage_data = [
    pytest.param(order, gridsize, id=f"db{order}-{gridsize}")
    for order in (2, 3, 4)
    for gridsize in (50, 1000, 10000)
]


@pytest.mark.parametrize(("order", "gridsize"), coverage_data)
def test_cell_coverage(order: int, gridsize: int) -> None:
    """Cells cover the whole grid exactly once."""
    sizing = GridSizing.from_request(order, gridsize)
    cells = grid_cell_indices(sizing.recursion_number, sizing.maxsupport)
    assert cells.shape == (sizing.bins_per_int, sizing.maxsupport)
    sorted_cells, _ = cells.flatten().sort()
    torch.testing.assert_close(
        sorted_cells,
        torch.arange(sizing.gridsize, device=cells.device),
    )


@pytest.mark.parametrize(("order", "gridsize"), coverage_data)
def test_grid_filled_once(order: int, gridsize: int) -> None:
    """Built grids have every cell set exactly once."""
    grid = build_wavelet_grid(order, gridsize)
    assert grid.nbins == GridSizing.from_request(order, gridsize).gridsize
    assert grid.nbins >= gridsize
    grid.check_coverage()
    assert torch.isfinite(grid.values).all()
    assert torch.isfinite(grid.derivatives).all()


def test_db2_small_grid() -> None:
    """Test the db2 grid with 10 requested bins."""
    grid = build_wavelet_grid(2, 10)
    assert grid.name == "db2_phi"
    assert grid.label == "position"
    assert grid.nbins == 12
    assert grid.bounds == (0.0, 3.0)
    assert not grid.periodic
    torch.testing.assert_close(
        grid.positions,
        torch.arange(12, **specs) / 4,
    )


@pytest.mark.parametrize(("do_wavelet"), [False, True])
def test_idempotence(do_wavelet: bool) -> None:  # noqa: FBT001
    """Identical requests give identical grids."""
    grid_1 = build_wavelet_grid(4, 1000, do_wavelet)
    grid_2 = build_wavelet_grid(4, 1000, do_wavelet)
    assert torch.equal(grid_1.values, grid_2.values)
    assert torch.equal(grid_1.derivatives, grid_2.derivatives)


@pytest.mark.parametrize(("order"), [2, 3, 5])
def test_integer_values_on_grid(order: int) -> None:
    """Cells at integer positions hold the values at integers."""
    grid = build_wavelet_grid(order, 500)
    sizing = GridSizing.from_request(order, 500)
    h = build_transfer_matrices(get_filter_coefficients(order, **specs))
    values = compute_integer_values(h.m0, 0)
    derivs = compute_integer_values(h.m0, 1)
    torch.testing.assert_close(grid.values[:: sizing.bins_per_int], values)
    torch.testing.assert_close(
        grid.derivatives[:: sizing.bins_per_int, 0],
        derivs,
    )


@pytest.mark.parametrize(("order"), [6, 8])
def test_derivatives_match_finite_differences(order: int) -> None:
    """Derivatives approach central differences of the values."""
    maxsupport = 2 * order - 1
    errors = []
    for r in (6, 9):
        grid = build_wavelet_grid(order, maxsupport * 2**r)
        values = grid.values
        derivs = grid.derivatives[:, 0]
        central = (values[2:] - values[:-2]) / (2 * grid.spacing)
        errors.append((central - derivs[1:-1]).abs().max().item())
    assert errors[1] < errors[0]
    assert errors[1] < 1e-2 * grid.derivatives.abs().max().item()


@pytest.mark.parametrize(("order"), [3, 6])
def test_wavelet_two_scale_relation(order: int) -> None:
    """ψ(y) = Σ 2 g[k] φ(2y - k) on grid cells."""
    maxsupport = 2 * order - 1
    r = 6
    psi = build_wavelet_grid(order, maxsupport * 2**r, do_wavelet=True)
    phi = build_wavelet_grid(order, maxsupport * 2 ** (r - 1))
    assert psi.name == f"db{order}_psi"
    g = get_filter_coefficients(order, is_scaling=False, **specs)
    half = 2 ** (r - 1)
    cells = torch.arange(psi.nbins, device=psi.values.device)
    expected_values = torch.zeros_like(psi.values)
    expected_derivs = torch.zeros_like(psi.values)
    for k, g_k in enumerate(g):
        source = cells - k * half
        valid = (source >= 0) & (source < phi.nbins)
        src = source[valid]
        expected_values[valid] += 2 * g_k * phi.values[src]
        expected_derivs[valid] += 4 * g_k * phi.derivatives[src, 0]
    torch.testing.assert_close(psi.values, expected_values)
    torch.testing.assert_close(psi.derivatives[:, 0], expected_derivs)


@pytest.mark.parametrize(
    ("order", "gridsize"),
    [(0, 100), (39, 100), (-2, 100), (2, 0), (2, 2.5), (2, "100"), (2, True)],
)
def test_invalid_requests(order: int, gridsize: int) -> None:
    """Invalid requests raise before any computation."""
    with pytest.raises(ConfigurationError):
        build_wavelet_grid(order, gridsize)


@pytest.mark.parametrize(("order"), [2, 3, 4, 6, 10])
def test_single_precision_build(order: int) -> None:
    """Grids can be built in single precision."""
    grid = build_wavelet_grid(order, 100, dtype=torch.float32)
    assert grid.values.dtype == torch.float32
    grid.check_coverage()
    assert torch.isfinite(grid.values).all()
    assert torch.isfinite(grid.derivatives).all()


def test_haar_normalization() -> None:
    """Haar values at integers cannot be normalized."""
    with pytest.raises(NumericalError):
        build_wavelet_grid(1, 10)


def test_fill_grid_mismatching_maps() -> None:
    """Values and derivatives must share their addresses."""
    grid = WaveletGrid("test", "position", 0, 3, 12)
    values = DyadicValues(depth=2, values=torch.zeros((4, 3), **specs))
    derivs = DyadicValues(depth=1, values=torch.zeros((2, 3), **specs))
    with pytest.raises(InternalConsistencyError):
        fill_grid(grid, values, derivs)


def test_fill_grid_wrong_grid_size() -> None:
    """A grid larger than the cascade output is not fully covered."""
    grid = WaveletGrid("test", "position", 0, 3, 13)
    values = DyadicValues(depth=2, values=torch.ones((4, 3), **specs))
    with pytest.raises(InternalConsistencyError):
        fill_grid(grid, values, values)
