"""Grid sizing."""

from __future__ import annotations

from typing import NamedTuple

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

from dbwavelets.exceptions import ConfigurationError


def compute_recursion_number(maxsupport: int, gridsize: int) -> int:
    """Smallest r such that maxsupport * 2**r >= gridsize.

    Args:
        maxsupport (int): Support length.
        gridsize (int): Requested number of cells.

    Returns:
        int: Recursion number.
    """
    recursion_number = 0
    while maxsupport << recursion_number < gridsize:
        recursion_number += 1
    return recursion_number


class GridSizing(NamedTuple):
    """Grid sizing for a given wavelet order."""

    maxsupport: int
    recursion_number: int

    @property
    def bins_per_int(self) -> int:
        """Number of cells per unit interval."""
        return 1 << self.recursion_number

    @property
    def gridsize(self) -> int:
        """Actual number of cells, at least the requested one."""
        return self.maxsupport * self.bins_per_int

    @classmethod
    def from_request(cls, order: int, requested_gridsize: int) -> Self:
        """Size the grid for a given order and requested size.

        Args:
            order (int): Wavelet order.
            requested_gridsize (int): Minimal number of cells.

        Raises:
            ConfigurationError: If the order or the size is not an integer
                or is lower than 1.

        Returns:
            Self: Grid sizing.
        """
        checked = (("Wavelet order", order), ("Grid size", requested_gridsize))
        for name, value in checked:
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{name} must be an integer, not {type(value).__name__}."
                raise ConfigurationError(msg)
        if order < 1:
            msg = f"Wavelet order must be at least 1, got {order}."
            raise ConfigurationError(msg)
        if requested_gridsize < 1:
            msg = f"Grid size must be at least 1, got {requested_gridsize}."
            raise ConfigurationError(msg)
        maxsupport = 2 * order - 1
        return cls(
            maxsupport=maxsupport,
            recursion_number=compute_recursion_number(
                maxsupport, requested_gridsize
            ),
        )
