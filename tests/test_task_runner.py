from __future__ import annotations

import pytest

QtCore = pytest.importorskip("PyQt6.QtCore")

from hidpi_configurator.workers.task_runner import FunctionTask, TaskRunner  # noqa: E402


@pytest.fixture(scope="module")
def qt_app():
    return QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])


def _boom() -> None:
    raise RuntimeError("script exploded")


def test_function_task_emits_result(qt_app):
    task = FunctionTask(lambda a, b: a + b, 2, 3)
    results = []
    task.signals.finished.connect(results.append)
    task.run()
    assert results == [5]


def test_function_task_emits_traceback_on_failure(qt_app):
    task = FunctionTask(_boom)
    messages = []
    task.signals.failed.connect(messages.append)
    task.run()
    assert len(messages) == 1
    assert messages[0].startswith("script exploded")
    assert "Traceback" in messages[0]


def test_run_in_background_delivers_on_owner_thread(qt_app):
    runner = TaskRunner()
    finished, failed = [], []

    runner.run_in_background(lambda: "ok", finished.append, failed.append)
    runner.run_in_background(_boom, finished.append, failed.append)
    assert runner.wait_for_done(5000)

    for _ in range(50):
        if runner.active_count == 0:
            break
        qt_app.processEvents(QtCore.QEventLoop.ProcessEventsFlag.AllEvents, 50)

    assert finished == ["ok"]
    assert len(failed) == 1 and "script exploded" in failed[0]
    assert runner.active_count == 0
