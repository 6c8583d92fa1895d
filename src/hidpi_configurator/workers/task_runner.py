"""Utilities for running functions in background threads."""
from __future__ import annotations

import traceback
from typing import Any, Callable

from loguru import logger
from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal


class TaskSignals(QObject):
    """Signals available from a background task."""

    finished = pyqtSignal(object)
    failed = pyqtSignal(str)


class FunctionTask(QRunnable):
    """Wrap a callable for execution in the Qt thread pool."""

    def __init__(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        super().__init__()
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.signals = TaskSignals()
        # Keep the Python wrapper alive until we drop it ourselves.
        self.setAutoDelete(False)

    def run(self) -> None:
        try:
            result = self.fn(*self.args, **self.kwargs)
        except Exception as exc:  # noqa: BLE001
            tb = traceback.format_exc()
            self.signals.failed.emit(f"{exc}\n{tb}")
        else:
            self.signals.finished.emit(result)


class TaskRunner:
    """Thin wrapper around QThreadPool for convenience.

    Callbacks passed to :meth:`run_in_background` are invoked on the thread that
    created the task, which is the GUI thread for every caller in this app.
    """

    def __init__(self, max_threads: int | None = None) -> None:
        self._pool = QThreadPool.globalInstance()
        if max_threads is not None:
            self._pool.setMaxThreadCount(max_threads)
        self._active_tasks: set[FunctionTask] = set()

    def submit(self, task: FunctionTask) -> None:
        self._pool.start(task)

    def run_in_background(
        self,
        fn: Callable[[], Any],
        on_finished: Callable[[Any], None],
        on_failed: Callable[[str], None],
    ) -> FunctionTask:
        task = FunctionTask(fn)
        self._active_tasks.add(task)
        task.signals.finished.connect(lambda result, t=task: self._complete(t, on_finished, result))
        task.signals.failed.connect(lambda message, t=task: self._complete(t, on_failed, message))
        self.submit(task)
        return task

    @property
    def active_count(self) -> int:
        return len(self._active_tasks)

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)

    def _complete(self, task: FunctionTask, callback: Callable[[Any], None], payload: Any) -> None:
        self._active_tasks.discard(task)
        logger.debug("Background task finished; {} still running", len(self._active_tasks))
        callback(payload)
