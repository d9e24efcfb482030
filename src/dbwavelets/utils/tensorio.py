"""Input / output methods for tensors."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import torch

from dbwavelets.exceptions import InvalidSavingFileError
from dbwavelets.specs import defaults


def raise_if_invalid_savefile(file: Path) -> None:
    """Raise an error if the saving file is invalid.

    Args:
        file (Path): Output file.

    Raises:
        InvalidSavingFileError: if the saving file extension is not .pt.
    """
    if file.suffix != ".pt":
        msg = f"Tensors are expected to be saved in an .pt file, not {file}."
        raise InvalidSavingFileError(msg)


def save(
    tensors: dict[str, torch.Tensor],
    file: str | Path,
    *,
    metadata: dict[str, Any] | None = None,
) -> None:
    """Save tensors to a given file.

    Tensors are moved to cpu and cast to float64 before saving.

    Args:
        tensors (dict[str, torch.Tensor]): Tensors to save.
        file (str | Path): Output file path.
        metadata (dict[str, Any] | None, optional): Plain python values
            to store alongside. Defaults to None.
    """
    f = Path(file)
    raise_if_invalid_savefile(f)
    to_save = {
        "tensors": {
            k: v.to(**defaults.get_save_specs()) for k, v in tensors.items()
        },
        "metadata": metadata or {},
    }
    torch.save(to_save, f)


def load(
    file: str | Path,
    *,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> tuple[dict[str, torch.Tensor], dict[str, Any]]:
    """Load tensors from a given file.

    Args:
        file (str | Path): Input file path.
        dtype (torch.dtype | None): Data type of the tensors to load.
            Defaults to None.
        device (torch.device | None): Device of the tensors to load.
            Defaults to None.

    Returns:
        tuple[dict[str, torch.Tensor], dict[str, Any]]: Tensors and metadata.
    """
    f = Path(file)
    raise_if_invalid_savefile(f)
    content: dict[str, Any] = torch.load(f, weights_only=True)
    tensors = {
        k: v.to(**defaults.get(dtype=dtype, device=device))
        for k, v in content["tensors"].items()
    }
    return tensors, content["metadata"]
