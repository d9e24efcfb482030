"""Storage paths.

Output paths are relative to the $STORAGE directory, which can be set in a
.env file at the project root.
"""

import os
from pathlib import Path

STORAGE_KEY = "STORAGE"


class StorageError(Exception):
    """Storage-related exception."""


def get_storage_path(key: str = STORAGE_KEY) -> Path:
    """Storage root from environment variables.

    Args:
        key (str, optional): Environment variable. Defaults to "STORAGE".

    Raises:
        StorageError: If the variable is not set.

    Returns:
        Path: Storage root.
    """
    if key not in os.environ:
        msg = f"Impossible to read the {key} from environment variables."
        raise StorageError(msg)
    return Path(os.environ[key])


def get_absolute_storage_path(path: Path) -> Path:
    """Resolve a path against the storage root.

    Args:
        path (Path): Relative path, or absolute path within storage.

    Raises:
        StorageError: If path is absolute and outside of storage.

    Returns:
        Path: Absolute storage path.
    """
    root = get_storage_path()
    if not path.is_absolute():
        return root.joinpath(path)
    if not path.is_relative_to(root):
        msg = f"Path {path} is outside of {root}, use a relative path instead."
        raise StorageError(msg)
    return path


def ensure_directory(directory: Path) -> Path:
    """Create a storage directory ignored by git.

    Args:
        directory (Path): Directory, created with its parents if missing.

    Returns:
        Path: Directory.
    """
    if not directory.is_dir():
        directory.mkdir(parents=True)
        directory.joinpath(".gitignore").write_text("*")
    return directory
