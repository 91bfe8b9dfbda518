from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relphase.core.config import DetectionConfig, load_config
from relphase.core.errors import ErrorCode
from relphase.core.result import Err
from relphase.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: DetectionConfig
    console: ConsoleProtocol


def build_context(*, config_path: Path | None = None, stderr: bool = False) -> CLIContext:
    """Load configuration and set up the console.

    An explicit config path must load; without one the defaults are used.
    """
    console = RichConsole(stderr=stderr)

    config = DetectionConfig()
    if config_path is not None:
        config_result = load_config(config_path)
        if isinstance(config_result, Err):
            console.error(config_result.error.message)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = config_result.value

    return CLIContext(config=config, console=console)
