"""Qt model for the recent activity table."""
from __future__ import annotations

from typing import List, Optional, Sequence

from PyQt6.QtCore import QAbstractTableModel, QModelIndex, Qt

from ..models.activity import ActivityRecord
from .theme import SEVERITY_COLORS


class ActivityTableModel(QAbstractTableModel):
    """Read-only view over a newest-first list of activity records."""

    HEADERS = ["Activity", "Details", "Time"]

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._rows: List[ActivityRecord] = []

    # Qt Model API ---------------------------------------------------------
    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self.HEADERS)

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole):  # noqa: N802,E501
        if role != Qt.ItemDataRole.DisplayRole or orientation != Qt.Orientation.Horizontal:
            return None
        return self.HEADERS[section]

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):  # noqa: N802
        if not index.isValid():
            return None

        record = self._rows[index.row()]
        if role == Qt.ItemDataRole.ForegroundRole and index.column() == 0:
            return SEVERITY_COLORS[record.severity]
        if role == Qt.ItemDataRole.ToolTipRole:
            return record.severity.value
        if role != Qt.ItemDataRole.DisplayRole:
            return None

        mapping = {
            0: record.title,
            1: record.description,
            2: record.formatted_timestamp(),
        }
        return mapping.get(index.column(), "")

    # Mutators --------------------------------------------------------------
    def set_records(self, records: Sequence[ActivityRecord]) -> None:
        """Replace the table contents with ``records``."""
        self.beginResetModel()
        self._rows = list(records)
        self.endResetModel()

    def record_at(self, row: int) -> Optional[ActivityRecord]:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None
