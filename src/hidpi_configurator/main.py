"""Application bootstrap utilities."""
from __future__ import annotations

import sys
from typing import Optional

from loguru import logger
from PyQt6.QtWidgets import QApplication

from .config import parse_config
from .io.script import HiDPIScript
from .logging import configure_logging
from .orchestrator import ConfigurationOrchestrator
from .ui.main_window import MainWindow
from .ui.theme import apply_dark_theme
from .workers.task_runner import TaskRunner


def main(argv: Optional[list[str]] = None) -> int:
    """Launch the HiDPI Configurator desktop application."""
    argv = list(sys.argv if argv is None else argv)
    config, qt_argv = parse_config(argv)
    configure_logging(config.log_level)
    logger.info("Using script {} via {}", config.script_path, config.shell)

    app = QApplication(qt_argv)
    apply_dark_theme(app)

    orchestrator = ConfigurationOrchestrator(
        HiDPIScript(config.script_path, config.shell),
        TaskRunner(),
        activity_limit=config.activity_limit,
    )
    window = MainWindow(orchestrator)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
