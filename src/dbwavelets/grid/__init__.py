"""Uniform grids holding values and derivatives."""

from dbwavelets.grid.core import WaveletGrid

__all__ = ["WaveletGrid"]
