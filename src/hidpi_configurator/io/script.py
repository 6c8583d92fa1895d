"""Invocation of the external ``hidpi.sh`` configuration script."""
from __future__ import annotations

import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

from loguru import logger


class ScriptMode(str, Enum):
    """First argument accepted by the configuration script."""

    INFO = "--info"
    AUTO = "--auto"
    DIAGNOSTICS = "--diagnostics"
    CONFIGURE = "--configure"
    RESET = "--reset"


class ScriptError(RuntimeError):
    """Base class for script invocation errors."""


class ScriptLaunchError(ScriptError):
    """Raised when the script process cannot be started or run to completion."""

    def __init__(self, argv: Sequence[str], reason: str) -> None:
        super().__init__(f"Unable to run {' '.join(argv)}: {reason}")
        self.argv = list(argv)
        self.reason = reason


@dataclass(frozen=True, slots=True)
class ScriptResult:
    """Captured outcome of one script invocation."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str = ""


class HiDPIScript:
    """Runs the configuration script through a shell interpreter.

    Calls block until the process exits. There is no timeout: a hung script
    blocks the calling worker for as long as it runs.
    """

    def __init__(self, script_path: Path | str = "hidpi.sh", shell: str = "/bin/bash") -> None:
        self.script_path = Path(script_path)
        self.shell = shell

    def build_argv(self, mode: ScriptMode, *args: str) -> list[str]:
        script = str(self.script_path)
        if not self.script_path.is_absolute() and not script.startswith("."):
            script = f"./{script}"
        return [self.shell, script, mode.value, *args]

    def run(self, mode: ScriptMode, *args: str) -> ScriptResult:
        """Execute the script in ``mode`` and capture its output."""
        argv = self.build_argv(mode, *args)
        logger.debug("Running {}", argv)
        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.error("Failed to launch {}: {}", argv, exc)
            raise ScriptLaunchError(argv, str(exc)) from exc

        stdout = completed.stdout.decode("utf-8", errors="replace")
        stderr = completed.stderr.decode("utf-8", errors="replace")
        if completed.returncode != 0:
            # Exit status does not change the outcome; it is only reported.
            logger.warning(
                "{} exited with status {}: {}", mode.value, completed.returncode, stderr.strip() or "-"
            )
        return ScriptResult(tuple(argv), completed.returncode, stdout, stderr)

    # Convenience wrappers ---------------------------------------------------
    def info(self) -> ScriptResult:
        return self.run(ScriptMode.INFO)

    def auto(self) -> ScriptResult:
        return self.run(ScriptMode.AUTO)

    def diagnostics(self) -> ScriptResult:
        return self.run(ScriptMode.DIAGNOSTICS)

    def configure(self, resolution: str, icon: str, custom_name: str = "") -> ScriptResult:
        return self.run(ScriptMode.CONFIGURE, resolution, icon, custom_name)

    def reset(self) -> ScriptResult:
        return self.run(ScriptMode.RESET)
