"""Grid configuration."""

from __future__ import annotations

from functools import cached_property

from pydantic import BaseModel, PositiveInt, field_validator

from dbwavelets.wavelets.coefficients import supported_orders
from dbwavelets.wavelets.sizing import GridSizing


class GridConfig(BaseModel):
    """Grid configuration."""

    order: PositiveInt
    gridsize: PositiveInt
    wavelet: bool = False

    @field_validator("order")
    @classmethod
    def check_order(cls, order: int) -> int:
        """Check that the order is available.

        Args:
            order (int): Wavelet order.

        Raises:
            ValueError: If the order is not supported.

        Returns:
            int: Order.
        """
        if order not in supported_orders():
            msg = f"Unsupported wavelet order: {order}."
            raise ValueError(msg)
        return order

    @cached_property
    def sizing(self) -> GridSizing:
        """Grid sizing."""
        return GridSizing.from_request(self.order, self.gridsize)
