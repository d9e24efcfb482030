"""Command Line Interface."""

import argparse
import pathlib
from dataclasses import dataclass
from pathlib import Path

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


@dataclass
class ScriptArgs:
    """Script arguments."""

    config: Path
    verbose: int

    @classmethod
    def from_cli(cls, args: list[str] | None = None) -> Self:
        """Instantiate script arguments from CLI.

        Args:
            args (list[str] | None, optional): Arguments to parse,
                sys.argv if None. Defaults to None.

        Returns:
            Self: ScriptArgs.
        """
        parser = argparse.ArgumentParser(
            description="Retrieve script arguments.",
        )
        cls._add_config(parser)
        cls._add_verbose(parser)
        return cls(**vars(parser.parse_args(args)))

    @classmethod
    def _add_config(cls, parser: argparse.ArgumentParser) -> None:
        """Add configuration to parser.

        Args:
            parser (argparse.ArgumentParser): Arguments parser.
        """
        parser.add_argument(
            "--config",
            required=True,
            type=pathlib.Path,
            help="Configuration File Path (from dbwavelets root level)",
        )

    @classmethod
    def _add_verbose(cls, parser: argparse.ArgumentParser) -> None:
        """Add verbose to parser.

        Args:
            parser (argparse.ArgumentParser): Arguments parser.
        """
        parser.add_argument(
            "-v",
            "--verbose",
            action="count",
            default=0,
            help="Verbose level.",
        )
