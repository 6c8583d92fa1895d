from __future__ import annotations

import os
from typing import Any, Callable

import pytest

from hidpi_configurator.io.script import HiDPIScript, ScriptLaunchError, ScriptMode, ScriptResult
from hidpi_configurator.orchestrator import ConfigurationOrchestrator


class FakeScript(HiDPIScript):
    """Records invocations instead of spawning processes."""

    def __init__(self) -> None:
        super().__init__("hidpi.sh", "/bin/bash")
        self.calls: list[tuple[str, ...]] = []
        self.outputs: dict[ScriptMode, str] = {}
        self.failing: set[ScriptMode] = set()

    def run(self, mode: ScriptMode, *args: str) -> ScriptResult:
        argv = self.build_argv(mode, *args)
        self.calls.append((mode.value, *args))
        if mode in self.failing:
            raise ScriptLaunchError(argv, "launch refused")
        return ScriptResult(tuple(argv), 0, self.outputs.get(mode, ""))


class ImmediateDispatcher:
    """Runs work synchronously, reporting through the same callbacks as TaskRunner."""

    def run_in_background(self, fn: Callable[[], Any], on_finished, on_failed) -> None:
        try:
            result = fn()
        except Exception as exc:  # noqa: BLE001
            on_failed(str(exc))
        else:
            on_finished(result)


class DeferredDispatcher:
    """Queues work so tests control when, and in which order, it completes."""

    def __init__(self) -> None:
        self.pending: list[tuple[Callable[[], Any], Callable, Callable]] = []

    def run_in_background(self, fn: Callable[[], Any], on_finished, on_failed) -> None:
        self.pending.append((fn, on_finished, on_failed))

    def complete(self, index: int = 0) -> None:
        fn, on_finished, on_failed = self.pending.pop(index)
        ImmediateDispatcher().run_in_background(fn, on_finished, on_failed)

    def complete_all(self) -> None:
        while self.pending:
            self.complete()


@pytest.fixture
def fake_script() -> FakeScript:
    return FakeScript()


@pytest.fixture
def orchestrator(fake_script: FakeScript) -> ConfigurationOrchestrator:
    return ConfigurationOrchestrator(fake_script, ImmediateDispatcher())


@pytest.fixture
def deferred() -> DeferredDispatcher:
    return DeferredDispatcher()


@pytest.fixture(scope="session")
def qt_app():
    """Widget application on the offscreen platform, shared by every GUI test."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance()
    if app is None:
        app = widgets.QApplication(["pytest"])
    elif not isinstance(app, widgets.QApplication):
        pytest.skip("a non-widget Qt application is already running")
    return app
