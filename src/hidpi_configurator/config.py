"""Application configuration."""
from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .models.activity import DEFAULT_ACTIVITY_LIMIT

SCRIPT_ENV = "HIDPI_SCRIPT"
SHELL_ENV = "HIDPI_SHELL"
LOG_LEVEL_ENV = "HIDPI_LOG_LEVEL"


@dataclass(slots=True)
class AppConfig:
    """Where to find the configuration script and how to run it."""

    script_path: Path = Path("hidpi.sh")
    shell: str = "/bin/bash"
    log_level: str = "INFO"
    activity_limit: int = DEFAULT_ACTIVITY_LIMIT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config, overriding defaults from ``HIDPI_*`` variables."""
        env = os.environ if environ is None else environ
        config = cls()
        if env.get(SCRIPT_ENV):
            config.script_path = Path(env[SCRIPT_ENV])
        if env.get(SHELL_ENV):
            config.shell = env[SHELL_ENV]
        if env.get(LOG_LEVEL_ENV):
            config.log_level = env[LOG_LEVEL_ENV].upper()
        return config


def parse_config(
    argv: Sequence[str], environ: Optional[Mapping[str, str]] = None
) -> tuple[AppConfig, list[str]]:
    """Split our options off ``argv``; the remainder is left for Qt.

    Command-line options take precedence over the environment.
    """
    config = AppConfig.from_env(environ)
    parser = argparse.ArgumentParser(prog="hidpi-configurator")
    parser.add_argument("--script", type=Path, default=config.script_path, help="Path to hidpi.sh")
    parser.add_argument("--shell", default=config.shell, help="Interpreter used to run the script")
    parser.add_argument("--log-level", default=config.log_level, help="loguru level name")
    options, remaining = parser.parse_known_args(list(argv[1:]))

    config.script_path = options.script
    config.shell = options.shell
    config.log_level = options.log_level.upper()
    program = argv[0] if argv else "hidpi-configurator"
    return config, [program, *remaining]
