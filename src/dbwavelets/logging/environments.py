"""Environment detection."""

import os

BATCH_JOB_VARIABLES = ("OAR_JOB_ID", "SLURM_JOB_ID", "PBS_JOBID")


def in_notebook() -> bool:
    """Detect if code is run within a jupyter notebook.

    Returns:
        bool: True if run within a Jupyter notebook.
    """
    try:
        from IPython import get_ipython  # noqa: PLC0415

        return get_ipython() is not None
    except ImportError:
        return False


def in_batch_job() -> bool:
    """Detect if code is run by a batch scheduler.

    Returns:
        bool: True if a scheduler job identifier is set.
    """
    return any(var in os.environ for var in BATCH_JOB_VARIABLES)
