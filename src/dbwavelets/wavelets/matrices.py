"""Transfer matrices of the two-scale relation."""

from __future__ import annotations

from typing import NamedTuple

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

import torch

from dbwavelets.exceptions import ConfigurationError


class TransferMatrices(NamedTuple):
    """Dilation matrices for even (m0) and odd (m1) dyadic shifts.

    For a refinable function f with translates values v(x) = [f(x + j)]_j:

        v((x + b) / 2) = m_b @ v(x),  b ∈ {0, 1}
    """

    m0: torch.Tensor
    m1: torch.Tensor

    @property
    def size(self) -> int:
        """Number of integer translates."""
        return self.m0.shape[0]

    def scaled(self, factor: float) -> Self:
        """Scaled copy of the matrices.

        Args:
            factor (float): Scaling factor.

        Returns:
            Self: New matrices, the current ones are left untouched.
        """
        return TransferMatrices(m0=self.m0 * factor, m1=self.m1 * factor)


def _shifted_coefficients(
    coefficients: torch.Tensor,
    indices: torch.Tensor,
) -> torch.Tensor:
    """Gather 2 * coefficients[indices], zero for out-of-range indices."""
    in_range = (indices >= 0) & (indices < coefficients.shape[0])
    gathered = coefficients[indices.clamp(0, coefficients.shape[0] - 1)]
    return torch.where(in_range, 2 * gathered, torch.zeros_like(gathered))


def build_transfer_matrices(coefficients: torch.Tensor) -> TransferMatrices:
    """Build the transfer matrices from filter coefficients.

    With N = len(coefficients) - 1 and shift = 2i - j:
        m0[i, j] = 2 h[shift]      for 0 <= shift <= N
        m1[i, j] = 2 h[shift + 1]  for -1 <= shift <= N - 1

    Args:
        coefficients (torch.Tensor): Filter coefficients, even length.

    Raises:
        ConfigurationError: If coefficients are empty or of odd length.

    Returns:
        TransferMatrices: (N, N)-shaped m0 and m1.
    """
    if coefficients.ndim != 1 or coefficients.numel() == 0:
        msg = "Filter coefficients must be a non-empty 1D tensor."
        raise ConfigurationError(msg)
    if coefficients.numel() % 2 != 0:
        msg = (
            "Filter coefficients must have an even length, "
            f"got {coefficients.numel()}."
        )
        raise ConfigurationError(msg)
    n = coefficients.numel() - 1
    i = torch.arange(n, device=coefficients.device)[:, None]
    j = torch.arange(n, device=coefficients.device)[None, :]
    shift = 2 * i - j
    return TransferMatrices(
        m0=_shifted_coefficients(coefficients, shift),
        m1=_shifted_coefficients(coefficients, shift + 1),
    )
