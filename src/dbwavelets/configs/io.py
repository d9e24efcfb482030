"""Input/Output Configuration."""

from __future__ import annotations

from functools import cached_property
from pathlib import Path

from pydantic import BaseModel, Field

from dbwavelets.utils.storage import ensure_directory, get_absolute_storage_path


class IOConfig(BaseModel):
    """Output configuration."""

    save: bool = True
    directory_str: str = Field(alias="directory")

    @cached_property
    def directory(self) -> Path:
        """Output directory, relative to the storage root."""
        path = get_absolute_storage_path(Path(self.directory_str))
        return ensure_directory(path)

    def file_for(self, name: str) -> Path:
        """Output file for a given grid.

        Args:
            name (str): Grid name.

        Returns:
            Path: <directory>/<name>.pt
        """
        return self.directory.joinpath(f"{name}.pt")
