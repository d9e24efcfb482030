"""Tests."""

import argparse
from pathlib import Path

import pytest

from dbwavelets.specs import DEVICE


def pytest_addoption(parser: pytest.Parser) -> None:
    """Pytest arg parser."""
    parser.addoption(
        "--cpu",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="use CPU for tests",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure device."""
    if config.getoption("--cpu"):
        DEVICE.use_cpu()


@pytest.fixture
def storage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Storage root set to a temporary directory."""
    monkeypatch.setenv("STORAGE", str(tmp_path))
    return tmp_path
