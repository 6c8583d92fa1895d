"""Helpers for talking to the external HiDPI configuration script."""

from .script import HiDPIScript, ScriptError, ScriptLaunchError, ScriptMode, ScriptResult

__all__ = [
    "HiDPIScript",
    "ScriptError",
    "ScriptLaunchError",
    "ScriptMode",
    "ScriptResult",
]
