"""Cascade algorithm.

Let v(x) = [f(x), f(x + 1), ..., f(x + N - 1)] for x in [0, 1). The
two-scale relation gives, for a bit b:

    v((x + b) / 2) = M_b @ v(x)

Starting from the values at integers v(0), each refinement prepends a bit
to the binary expansion of x. At depth d, the point dec / 2**d is stored in
row dec, the child through bit b of row dec is row (b << d) | dec.

The wavelet ψ only enters through its own relation ψ(y) = Σ 2 g[k] φ(2y - k),
so wavelet values are obtained by applying (G0, G1) at the last refinement
and (M0, M1) everywhere else.
"""

from __future__ import annotations

from typing import NamedTuple

import torch

from dbwavelets.logging import getLogger
from dbwavelets.wavelets.matrices import TransferMatrices

logger = getLogger(__name__)


class DyadicValues(NamedTuple):
    """Translates values at all dyadic points of a given depth.

    values[dec] holds the N translates values at dec / 2**depth.
    """

    depth: int
    values: torch.Tensor

    @property
    def addresses(self) -> torch.Tensor:
        """Decimal values of the addresses, in storage order."""
        return torch.arange(self.values.shape[0], device=self.values.device)

    @property
    def n_translates(self) -> int:
        """Number of integer translates."""
        return self.values.shape[1]

    def points(self) -> torch.Tensor:
        """Dyadic points in [0, 1) the rows correspond to."""
        return self.addresses.to(self.values.dtype) / (1 << self.depth)


def refine(
    values: torch.Tensor,
    matrices: TransferMatrices,
) -> torch.Tensor:
    """Go one level deeper in the refinement tree.

    Args:
        values (torch.Tensor): (2**d, N)-shaped values at depth d.
        matrices (TransferMatrices): Matrices for the bits 0 and 1.

    Returns:
        torch.Tensor: (2**(d+1), N)-shaped values at depth d+1.
    """
    return torch.cat([values @ matrices.m0.T, values @ matrices.m1.T])


def cascade(
    h_matrices: TransferMatrices,
    seed: torch.Tensor,
    recursion_number: int,
    *,
    deriv: int = 0,
    g_matrices: TransferMatrices | None = None,
) -> DyadicValues:
    """Evaluate the function at all dyadic points of a given depth.

    Args:
        h_matrices (TransferMatrices): Scaling transfer matrices.
        seed (torch.Tensor): (N,)-shaped normalized values at integers.
        recursion_number (int): Depth of the refinement.
        deriv (int, optional): Derivative order, each refinement contributes
            a factor 2 per derivative. Defaults to 0.
        g_matrices (TransferMatrices | None, optional): Wavelet transfer
            matrices, wavelet values are returned if given. Defaults to None.

    Returns:
        DyadicValues: Values at depth recursion_number.
    """
    factor = 2.0**deriv
    h = h_matrices.scaled(factor)
    g = None if g_matrices is None else g_matrices.scaled(factor)
    wavelet = g is not None

    if recursion_number == 0:
        values = (g.m0 @ seed) if wavelet else seed
        return DyadicValues(depth=0, values=values.unsqueeze(0))

    last = recursion_number - 1
    if wavelet and last == 0:
        values = refine(seed.unsqueeze(0), g)
    else:
        values = torch.stack([seed, h.m1 @ seed])

    for level in range(1, recursion_number):
        matrices = g if (wavelet and level == last) else h
        values = refine(values, matrices)
        logger.debug(f"Cascade (deriv={deriv}) reached depth {level + 1}.")

    return DyadicValues(depth=recursion_number, values=values)
