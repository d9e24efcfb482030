"""Uniform one-dimensional grid.

Cells are indexed from 0 to nbins - 1, cell k sitting at
x_min + k * (x_max - x_min) / nbins:

x_min                                              x_max
  0-------1-------2-- ... --(nbins - 1)---------------|

Each cell stores a value and the derivative along the grid coordinate.
"""

from __future__ import annotations

from pathlib import Path

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

import torch

from dbwavelets.exceptions import InternalConsistencyError
from dbwavelets.specs import defaults
from dbwavelets.utils import tensorio


class WaveletGrid:
    """Grid of values and first derivatives over [x_min, x_max].

    Tensors:
        ├── positions: (nbins,)-shaped
        ├── values: (nbins,)-shaped
        └── derivatives: (nbins, 1)-shaped
    """

    def __init__(
        self,
        name: str,
        label: str,
        x_min: float,
        x_max: float,
        nbins: int,
        *,
        periodic: bool = False,
        dtype: torch.dtype | None = None,
        device: torch.device | None = None,
    ) -> None:
        """Instantiate an empty grid.

        Args:
            name (str): Grid name.
            label (str): Coordinate label.
            x_min (float): Lower bound.
            x_max (float): Upper bound.
            nbins (int): Number of cells.
            periodic (bool, optional): Whether the grid is periodic.
                Defaults to False.
            dtype (torch.dtype | None, optional): Dtype. Defaults to None.
            device (torch.device | None, optional): Device.
                Defaults to None.

        Raises:
            ValueError: If nbins < 1 or x_max <= x_min.
        """
        if nbins < 1:
            msg = f"A grid requires at least one bin, got {nbins}."
            raise ValueError(msg)
        if x_max <= x_min:
            msg = f"Invalid bounds: [{x_min}, {x_max}]."
            raise ValueError(msg)
        self._name = name
        self._label = label
        self._x_min = float(x_min)
        self._x_max = float(x_max)
        self._nbins = nbins
        self._periodic = periodic
        self._specs = defaults.get(dtype=dtype, device=device)
        self._values = torch.zeros((nbins,), **self._specs)
        self._derivatives = torch.zeros((nbins, 1), **self._specs)
        self._counts = torch.zeros(
            (nbins,), dtype=torch.int64, device=self._specs["device"]
        )

    @property
    def name(self) -> str:
        """Grid name."""
        return self._name

    @property
    def label(self) -> str:
        """Coordinate label."""
        return self._label

    @property
    def bounds(self) -> tuple[float, float]:
        """Grid bounds."""
        return (self._x_min, self._x_max)

    @property
    def nbins(self) -> int:
        """Number of cells."""
        return self._nbins

    @property
    def periodic(self) -> bool:
        """Whether the grid is periodic."""
        return self._periodic

    @property
    def spacing(self) -> float:
        """Distance between two consecutive cells."""
        return (self._x_max - self._x_min) / self._nbins

    @property
    def positions(self) -> torch.Tensor:
        """Cell positions."""
        k = torch.arange(self._nbins, **self._specs)
        return self._x_min + k * self.spacing

    @property
    def values(self) -> torch.Tensor:
        """Values."""
        return self._values

    @property
    def derivatives(self) -> torch.Tensor:
        """Derivatives."""
        return self._derivatives

    def __repr__(self) -> str:
        """String representation of the grid."""
        return (
            f"Grid {self._name}\n"
            f"\t├── {self._label}: [{self._x_min}, {self._x_max}]\n"
            f"\t├── bins: {self._nbins}\n"
            f"\t└── periodic: {self._periodic}"
        )

    def set_values_and_derivatives(
        self,
        index: int | torch.Tensor,
        value: float | torch.Tensor,
        derivatives: torch.Tensor,
    ) -> None:
        """Set values and derivatives of one or several cells.

        Args:
            index (int | torch.Tensor): Cell index, or (n,)-shaped indices.
            value (float | torch.Tensor): Value, or (n,)-shaped values.
            derivatives (torch.Tensor): (1,)-shaped derivative, or
                (n, 1)-shaped derivatives.

        Raises:
            IndexError: If an index is out of the grid.
        """
        idx = torch.as_tensor(index, device=self._specs["device"]).reshape(-1)
        if idx.numel() and (idx.min() < 0 or idx.max() >= self._nbins):
            msg = f"Cell indices must lie in [0, {self._nbins})."
            raise IndexError(msg)
        self._values[idx] = torch.as_tensor(value, **self._specs).reshape(-1)
        self._derivatives[idx] = torch.as_tensor(
            derivatives, **self._specs
        ).reshape(-1, 1)
        self._counts.index_add_(0, idx, torch.ones_like(idx))

    def check_coverage(self) -> None:
        """Check that every cell has been set exactly once.

        Raises:
            InternalConsistencyError: If some cells are unset or set
                several times.
        """
        unset = int((self._counts == 0).sum().item())
        overwritten = int((self._counts > 1).sum().item())
        if unset or overwritten:
            msg = (
                f"Grid {self._name} is inconsistently filled: {unset} unset "
                f"cells and {overwritten} cells set more than once."
            )
            raise InternalConsistencyError(msg)

    def _nodes(self) -> tuple[torch.Tensor, torch.Tensor]:
        """Values and derivatives at the nbins + 1 interpolation nodes."""
        if self._periodic:
            last_value = self._values[:1]
            last_deriv = self._derivatives[:1, 0]
        else:
            last_value = torch.zeros((1,), **self._specs)
            last_deriv = torch.zeros((1,), **self._specs)
        return (
            torch.cat([self._values, last_value]),
            torch.cat([self._derivatives[:, 0], last_deriv]),
        )

    def evaluate(self, x: torch.Tensor) -> tuple[torch.Tensor, torch.Tensor]:
        """Evaluate the gridded function using cubic Hermite interpolation.

        The node at x_max holds 0 for non-periodic grids, values outside
        [x_min, x_max] are 0.

        Args:
            x (torch.Tensor): Locations.

        Returns:
            tuple[torch.Tensor, torch.Tensor]: Values and derivatives, both
                shaped like x.
        """
        x = torch.as_tensor(x, **self._specs)
        dx = self.spacing
        length = self._x_max - self._x_min
        t = x - self._x_min
        if self._periodic:
            t = torch.remainder(t, length)
        inside = (t >= 0) & (t <= length)
        t = t / dx
        k = torch.floor(t).clamp(0, self._nbins - 1)
        u = (t - k).clamp(0, 1)
        k = k.to(torch.int64)
        f, d = self._nodes()
        f0, f1, d0, d1 = f[k], f[k + 1], d[k], d[k + 1]

        u2 = u * u
        u3 = u2 * u
        values = (
            (2 * u3 - 3 * u2 + 1) * f0
            + (u3 - 2 * u2 + u) * dx * d0
            + (-2 * u3 + 3 * u2) * f1
            + (u3 - u2) * dx * d1
        )
        derivatives = (
            (6 * u2 - 6 * u) * (f0 - f1) / dx
            + (3 * u2 - 4 * u + 1) * d0
            + (3 * u2 - 2 * u) * d1
        )
        zeros = torch.zeros_like(values)
        return (
            torch.where(inside, values, zeros),
            torch.where(inside, derivatives, zeros),
        )

    def save(self, file: str | Path) -> None:
        """Save the grid to a .pt file.

        Args:
            file (str | Path): Output file.
        """
        tensorio.save(
            {
                "values": self._values,
                "derivatives": self._derivatives,
                "counts": self._counts,
            },
            file,
            metadata={
                "name": self._name,
                "label": self._label,
                "x_min": self._x_min,
                "x_max": self._x_max,
                "nbins": self._nbins,
                "periodic": self._periodic,
            },
        )

    @classmethod
    def from_file(
        cls,
        file: str | Path,
        *,
        dtype: torch.dtype | None = None,
        device: torch.device | None = None,
    ) -> Self:
        """Load a grid saved with WaveletGrid.save.

        Args:
            file (str | Path): Input file.
            dtype (torch.dtype | None, optional): Dtype. Defaults to None.
            device (torch.device | None, optional): Device.
                Defaults to None.

        Returns:
            Self: Grid.
        """
        tensors, metadata = tensorio.load(file, dtype=dtype, device=device)
        grid = cls(
            metadata["name"],
            metadata["label"],
            metadata["x_min"],
            metadata["x_max"],
            metadata["nbins"],
            periodic=metadata["periodic"],
            dtype=dtype,
            device=device,
        )
        grid._values = tensors["values"]  # noqa: SLF001
        grid._derivatives = tensors["derivatives"]  # noqa: SLF001
        grid._counts = tensors["counts"].to(torch.int64)  # noqa: SLF001
        return grid
