"""Values at integers from the eigenvectors of the transfer matrix."""

from __future__ import annotations

import torch

from dbwavelets.exceptions import LinearAlgebraError, NumericalError
from dbwavelets.logging import getLogger

logger = getLogger(__name__)

NORMALIZATION_TOLERANCE = 1e-12


def extract_eigenvector(
    matrix: torch.Tensor,
    eigenvalue: float,
    *,
    tolerance: float | None = None,
) -> torch.Tensor:
    """Eigenvector of a matrix for a known eigenvalue.

    The vector is the right singular vector of (M - λI) associated with its
    smallest singular value. Only simple eigenvalues are handled.

    Args:
        matrix (torch.Tensor): (N, N)-shaped matrix.
        eigenvalue (float): Eigenvalue λ.
        tolerance (float | None, optional): Relative threshold under which
            a singular value is considered zero. Defaults to None, which
            uses the square root of the machine epsilon of the matrix dtype.

    Raises:
        LinearAlgebraError: If the decomposition fails, if λ is not an
            eigenvalue or if λ is not simple.

    Returns:
        torch.Tensor: (N,)-shaped eigenvector, arbitrary scale.
    """
    n = matrix.shape[0]
    eye = torch.eye(n, dtype=matrix.dtype, device=matrix.device)
    try:
        _, s, vh = torch.linalg.svd(matrix - eigenvalue * eye)
    except torch.linalg.LinAlgError as e:
        msg = f"Singular value decomposition did not converge: {e}"
        raise LinearAlgebraError(msg) from e

    if tolerance is None:
        tolerance = torch.finfo(matrix.dtype).eps ** 0.5
    threshold = tolerance * max(s[0].item(), 1.0)
    logger.debug(f"Smallest singular values for λ={eigenvalue}: {s[-2:]}")
    if s[-1].item() > threshold:
        msg = (
            f"{eigenvalue} is not an eigenvalue of the matrix "
            f"(smallest singular value: {s[-1].item():.3e})."
        )
        raise LinearAlgebraError(msg)
    if n > 1 and s[-2].item() <= threshold:
        msg = (
            f"Eigenvalue {eigenvalue} is not simple, "
            "its eigenvector is not uniquely defined."
        )
        raise LinearAlgebraError(msg)
    return vh[-1]


def normalize_eigenvector(
    vector: torch.Tensor,
    deriv: int,
    *,
    tolerance: float = NORMALIZATION_TOLERANCE,
) -> torch.Tensor:
    """Scale values at integers to satisfy the moment condition.

    Σ_{i>=1} v[i] (-i)^deriv = 1

    Index 0 is left out of the sum.

    Args:
        vector (torch.Tensor): (N,)-shaped vector.
        deriv (int): Derivative order.
        tolerance (float, optional): Smallest acceptable |Σ|.
            Defaults to 1e-12.

    Raises:
        NumericalError: If the sum is too close to 0.

    Returns:
        torch.Tensor: Normalized vector.
    """
    i = torch.arange(1, vector.shape[0], dtype=vector.dtype, device=vector.device)
    norm = (vector[1:] * (-i) ** deriv).sum()
    if norm.abs().item() < tolerance:
        msg = (
            f"Normalization factor of the order {deriv} values is too close "
            f"to 0 ({norm.item():.3e})."
        )
        raise NumericalError(msg)
    return vector / norm


def compute_integer_values(matrix: torch.Tensor, deriv: int) -> torch.Tensor:
    """Values (or derivatives) of the scaling function at integers.

    Args:
        matrix (torch.Tensor): m0 transfer matrix.
        deriv (int): Derivative order, 0 or 1.

    Returns:
        torch.Tensor: (N,)-shaped normalized values.
    """
    eigenvector = extract_eigenvector(matrix, 0.5**deriv)
    return normalize_eigenvector(eigenvector, deriv)
