"""Specs utils."""

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

from typing import TypedDict

import torch


class Device:
    """Pytorch Device Object."""

    def __init__(self, device: str) -> None:
        """Instantiate the device.

        Args:
            device (str): Device value.
        """
        self._device = torch.device(device)

    def __repr__(self) -> str:
        """String representation of the device."""
        return repr(self._device)

    def set_manually(self, device: str) -> None:
        """Manually set the device.

        Args:
            device (str): Device type.

        Raises:
            TypeError: If device is not a string.
        """
        if not isinstance(device, str):
            msg = "'device' must be a string."
            raise TypeError(msg)

        self._device = torch.device(device)

    def use_cpu(self) -> None:
        """Set cpu as device."""
        return self.set_manually("cpu")

    def get(self) -> torch.device:
        """Get the device type.

        Returns:
            torch.device: Device type.
        """
        return self._device

    @classmethod
    def set_automatically(cls) -> Self:
        """Automatically sets the device to 'cuda' if possible.

        Returns:
            Self: Device.
        """
        return cls("cuda") if torch.cuda.is_available() else cls("cpu")


class TensorSpecs(TypedDict):
    """Tensor dtype and device."""

    dtype: torch.dtype
    device: torch.device
