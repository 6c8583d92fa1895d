"""Application-wide theme helpers."""
from __future__ import annotations

from PyQt6.QtGui import QColor, QPalette

from ..models.activity import Severity

SEVERITY_COLORS = {
    Severity.INFO: QColor(76, 110, 245),
    Severity.NOTICE: QColor(230, 150, 40),
    Severity.SUCCESS: QColor(70, 180, 90),
    Severity.FAILURE: QColor(220, 70, 70),
}

CARD_STYLESHEET = """
QFrame#statusCard, QFrame#infoCard {
    background-color: rgb(40, 43, 48);
    border-radius: 10px;
}
QPushButton#actionButton {
    text-align: left;
    padding: 12px;
    border-radius: 10px;
    background-color: rgb(40, 43, 48);
}
QPushButton#actionButton:hover {
    background-color: rgb(52, 56, 62);
}
QPushButton#iconButton:checked {
    border: 2px solid rgb(76, 110, 245);
    background-color: rgba(76, 110, 245, 40);
}
QLabel#pageTitle {
    font-size: 24px;
    font-weight: bold;
}
QLabel#sectionTitle {
    font-size: 16px;
    font-weight: 600;
}
QLabel#secondaryText {
    color: #8aa;
}
"""


def build_dark_palette() -> QPalette:
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(30, 32, 36))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(220, 220, 220))
    palette.setColor(QPalette.ColorRole.Base, QColor(24, 25, 28))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(34, 36, 40))
    palette.setColor(QPalette.ColorRole.Text, QColor(235, 235, 235))
    palette.setColor(QPalette.ColorRole.Button, QColor(40, 43, 48))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(235, 235, 235))
    palette.setColor(QPalette.ColorRole.Highlight, SEVERITY_COLORS[Severity.INFO])
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor(255, 255, 255))
    return palette


def apply_dark_theme(app) -> None:
    """Apply the dark palette plus card and sidebar styling."""
    app.setPalette(build_dark_palette())
    app.setStyle("Fusion")
    app.setStyleSheet(CARD_STYLESHEET)
