"""Build a Daubechies grid from a configuration file."""

from __future__ import annotations

from pathlib import Path

import torch

from dbwavelets.cli import ScriptArgs
from dbwavelets.configs.core import Configuration
from dbwavelets.logging import getLogger, setup_root_logger
from dbwavelets.logging.utils import box
from dbwavelets.specs import defaults
from dbwavelets.wavelets import build_wavelet_grid

torch.set_grad_enabled(False)

args = ScriptArgs.from_cli()
specs = defaults.get()

setup_root_logger(args.verbose)
logger = getLogger(__name__)

ROOT_PATH = Path(__file__).parent.parent
config = Configuration.from_toml(ROOT_PATH.joinpath(args.config))

sizing = config.grid.sizing
msg = box(
    f"Daubechies order {config.grid.order}",
    f"{'Wavelet' if config.grid.wavelet else 'Scaling'} function\n"
    f"Support: [0, {sizing.maxsupport})\n"
    f"Bins: {sizing.gridsize} ({sizing.bins_per_int} per unit)",
    style="round",
)
logger.info(msg)

grid = build_wavelet_grid(
    config.grid.order,
    config.grid.gridsize,
    config.grid.wavelet,
    **specs,
)

if config.io.save:
    file = config.io.file_for(grid.name)
    grid.save(file)
    logger.info(f"Grid saved to {file}")
