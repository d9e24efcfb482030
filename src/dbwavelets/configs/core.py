"""Configurations."""

# ruff: noqa: TC001

from __future__ import annotations

from typing import TYPE_CHECKING

from dbwavelets.configs.grid import GridConfig
from dbwavelets.configs.io import IOConfig

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

if TYPE_CHECKING:
    from pathlib import Path

import toml
from pydantic import BaseModel


class Configuration(BaseModel):
    """Configuration."""

    grid: GridConfig
    io: IOConfig

    @classmethod
    def from_toml(cls, file: Path) -> Self:
        """Load from a TOML file.

        Args:
            file (Path): File to load from.

        Returns:
            Self: Configuration.
        """
        return cls(**toml.load(file))
