"""Daubechies wavelets sampled on grids.

Grids hold the values and first derivatives of the scaling function φ (or of
the wavelet ψ) of order p over [0, 2p - 1), computed with the cascade
algorithm.
"""

from dotenv import load_dotenv

from dbwavelets.logging import setup_root_logger

# Load Environment variables
load_dotenv()
# Logging
setup_root_logger(1)
