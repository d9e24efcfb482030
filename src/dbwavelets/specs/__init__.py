"""Tensor specs used across the package."""

from dbwavelets.specs._utils import Device, TensorSpecs

DEVICE = Device.set_automatically()

__all__ = ["DEVICE", "TensorSpecs"]
