"""Configuration orchestrator: runs script commands and tracks their outcome."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol

from loguru import logger

from .io.script import HiDPIScript, ScriptResult
from .models import system_state as status
from .models.activity import DEFAULT_ACTIVITY_LIMIT, ActivityLog, ActivityRecord, Severity
from .models.display import DisplayIcon, parse_icon, validate_resolution
from .models.system_state import SystemState, parse_system_info

SUCCESS_ICON = "success"
FAILURE_ICON = "failure"


class Dispatcher(Protocol):
    """Runs ``fn`` off the caller's thread and reports back on the owning thread."""

    def run_in_background(
        self,
        fn: Callable[[], Any],
        on_finished: Callable[[Any], None],
        on_failed: Callable[[str], None],
    ) -> Any: ...


Listener = Callable[[SystemState, List[ActivityRecord]], None]


class OperationStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class OperationHandle:
    """Tracks one in-flight script invocation.

    Handles expose no cancel or timeout: once started, an operation stays
    pending until the script exits, however long that takes.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.status = OperationStatus.PENDING
        self.result: Optional[ScriptResult] = None
        self.error: Optional[str] = None
        self._callbacks: List[Callable[["OperationHandle"], None]] = []

    @property
    def done(self) -> bool:
        return self.status is not OperationStatus.PENDING

    @property
    def succeeded(self) -> bool:
        return self.status is OperationStatus.SUCCEEDED

    def add_done_callback(self, callback: Callable[["OperationHandle"], None]) -> None:
        """Call ``callback(handle)`` once the operation completes (now, if it already has)."""
        if self.done:
            callback(self)
        else:
            self._callbacks.append(callback)

    def _resolve(self, status_: OperationStatus, result: Optional[ScriptResult], error: Optional[str]) -> None:
        self.status = status_
        self.result = result
        self.error = error
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(self)

    def __repr__(self) -> str:
        return f"OperationHandle({self.name!r}, {self.status.value})"


@dataclass(frozen=True, slots=True)
class _OperationText:
    title: str
    started: str
    succeeded: str
    failed: str
    icon: str
    severity: Severity = Severity.INFO


_LOAD_INFO = _OperationText(
    "System Info",
    "Loading system information...",
    "System information loaded",
    "Failed to load system information",
    icon="info",
)
_AUTO = _OperationText(
    "Auto Configuration",
    "Starting automatic configuration...",
    "Configuration completed successfully",
    "Configuration failed",
    icon="wand",
)
_DIAGNOSTICS = _OperationText(
    "Diagnostics",
    "Running system diagnostics...",
    "Diagnostics completed",
    "Diagnostics failed",
    icon="stethoscope",
)
_CONFIGURE = _OperationText(
    "Configuration",
    "Applying configuration...",
    "Configuration applied successfully",
    "Configuration failed",
    icon="gear",
)
_RESET = _OperationText(
    "Reset",
    "Resetting configuration...",
    "Configuration reset successfully",
    "Reset failed",
    icon="reset",
    severity=Severity.NOTICE,
)


class ConfigurationOrchestrator:
    """Owns :class:`SystemState` and the activity log.

    Every public operation logs a started record, hands the script call to the
    dispatcher and returns immediately with an :class:`OperationHandle`. State is
    mutated only from the completion callbacks, which the dispatcher delivers on
    the owning thread. Operations are not serialised against each other.
    """

    def __init__(
        self,
        script: HiDPIScript,
        dispatcher: Dispatcher,
        activity_limit: int = DEFAULT_ACTIVITY_LIMIT,
    ) -> None:
        self._script = script
        self._dispatcher = dispatcher
        self._state = SystemState()
        self._activity = ActivityLog(activity_limit)
        self._listeners: List[Listener] = []

    # Observation -----------------------------------------------------------
    @property
    def state(self) -> SystemState:
        """Snapshot of the current state."""
        return replace(self._state)

    @property
    def activity(self) -> List[ActivityRecord]:
        """Activity records, newest first."""
        return self._activity.records()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener(state, activity)``; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Operations ------------------------------------------------------------
    def load_system_info(self) -> OperationHandle:
        return self._start(
            "load_system_info",
            _LOAD_INFO,
            self._script.info,
            self._system_info_loaded,
            on_failure=self._system_info_failed,
        )

    def auto_configure(self) -> OperationHandle:
        return self._start(
            "auto_configure", _AUTO, self._script.auto, lambda result: self._set_hidpi_status(status.HIDPI_CONFIGURED)
        )

    def run_diagnostics(self) -> OperationHandle:
        return self._start("run_diagnostics", _DIAGNOSTICS, self._script.diagnostics, None)

    def apply_configuration(self, resolution: str, icon: DisplayIcon | str, custom_name: str = "") -> OperationHandle:
        """Apply ``resolution`` and ``icon`` to the display, optionally renaming it.

        Raises ``ValueError`` for a malformed resolution or unknown icon before
        anything is logged or launched.
        """
        resolution = validate_resolution(resolution)
        icon_tag = parse_icon(icon).value
        return self._start(
            "apply_configuration",
            _CONFIGURE,
            lambda: self._script.configure(resolution, icon_tag, custom_name),
            lambda result: self._set_hidpi_status(status.HIDPI_CONFIGURED),
        )

    def reset_configuration(self) -> OperationHandle:
        return self._start(
            "reset_configuration",
            _RESET,
            self._script.reset,
            lambda result: self._set_hidpi_status(status.HIDPI_NOT_CONFIGURED),
        )

    def manual_setup(self) -> None:
        """Record that the user opened manual configuration; runs no command."""
        self._add_activity("Manual Setup", "Opening manual configuration...", "sliders", Severity.NOTICE)

    # Internals -------------------------------------------------------------
    def _start(
        self,
        name: str,
        text: _OperationText,
        command: Callable[[], ScriptResult],
        on_success: Optional[Callable[[ScriptResult], None]],
        on_failure: Optional[Callable[[str], None]] = None,
    ) -> OperationHandle:
        handle = OperationHandle(name)
        logger.info("{} started", name)
        self._add_activity(text.title, text.started, text.icon, text.severity)

        def finished(result: ScriptResult) -> None:
            logger.info("{} finished (exit status {})", name, result.returncode)
            if on_success is not None:
                on_success(result)
            self._add_activity(text.title, text.succeeded, SUCCESS_ICON, Severity.SUCCESS)
            handle._resolve(OperationStatus.SUCCEEDED, result, None)

        def failed(message: str) -> None:
            logger.error("{} failed: {}", name, message)
            if on_failure is not None:
                on_failure(message)
            self._add_activity(text.title, text.failed, FAILURE_ICON, Severity.FAILURE)
            handle._resolve(OperationStatus.FAILED, None, message)

        self._dispatcher.run_in_background(command, finished, failed)
        return handle

    def _system_info_loaded(self, result: ScriptResult) -> None:
        for attribute, value in parse_system_info(result.stdout).items():
            setattr(self._state, attribute, value)
        self._state.system_status = status.STATUS_READY
        self._state.hidpi_status = status.HIDPI_NOT_CONFIGURED
        self._state.backup_status = status.BACKUP_NONE
        logger.debug("System info parsed: {}", self._state.to_dict())

    def _system_info_failed(self, message: str) -> None:
        self._state.system_status = status.STATUS_INFO_ERROR

    def _set_hidpi_status(self, value: str) -> None:
        self._state.hidpi_status = value

    def _add_activity(self, title: str, description: str, icon_tag: str, severity: Severity) -> None:
        self._activity.add(ActivityRecord(title, description, icon_tag, severity))
        self._notify()

    def _notify(self) -> None:
        state = self.state
        activity = self.activity
        for listener in list(self._listeners):
            listener(state, activity)
