"""Main application window."""
from __future__ import annotations

from typing import Sequence

from loguru import logger
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QButtonGroup,
    QComboBox,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QStatusBar,
    QStyle,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from ..models.activity import ActivityRecord
from ..models.display import DEFAULT_ICON, DEFAULT_RESOLUTION, RESOLUTIONS, DisplayIcon
from ..models.system_state import SystemState
from ..orchestrator import ConfigurationOrchestrator
from .activity_table_model import ActivityTableModel


class _Card(QFrame):
    """Title/value pair on a rounded background."""

    def __init__(self, title: str, value: str, object_name: str, icon=None, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName(object_name)
        layout = QVBoxLayout(self)
        layout.setSpacing(4)
        if icon is not None:
            icon_label = QLabel()
            icon_label.setPixmap(icon.pixmap(24, 24))
            layout.addWidget(icon_label)
        title_label = QLabel(title)
        title_label.setStyleSheet("font-weight: 600;")
        self.value_label = QLabel(value)
        self.value_label.setObjectName("secondaryText")
        self.value_label.setWordWrap(True)
        layout.addWidget(title_label)
        layout.addWidget(self.value_label)

    def set_value(self, value: str) -> None:
        self.value_label.setText(value)


class MainWindow(QMainWindow):
    """Sidebar navigation over the dashboard, monitor and placeholder pages."""

    PAGE_DASHBOARD = 0
    PAGE_MONITOR = 1
    PAGE_BACKUP = 2
    PAGE_DIAGNOSTICS = 3
    PAGE_SETTINGS = 4

    PAGES = [
        ("Dashboard", QStyle.StandardPixmap.SP_ComputerIcon),
        ("Monitor Configuration", QStyle.StandardPixmap.SP_DesktopIcon),
        ("Backup & Restore", QStyle.StandardPixmap.SP_DriveHDIcon),
        ("Diagnostics", QStyle.StandardPixmap.SP_MessageBoxInformation),
        ("Settings", QStyle.StandardPixmap.SP_FileDialogDetailedView),
    ]

    state_changed = pyqtSignal(object, object)

    def __init__(self, orchestrator: ConfigurationOrchestrator, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("HiDPI Configurator")
        self.setMinimumSize(900, 600)

        self._orchestrator = orchestrator
        self._activity_model = ActivityTableModel(self)

        self.sidebar = QListWidget()
        self.sidebar.setFixedWidth(210)
        self.pages = QStackedWidget()
        for title, pixmap in self.PAGES:
            self.sidebar.addItem(QListWidgetItem(self.style().standardIcon(pixmap), title))

        self.pages.addWidget(self._scrollable(self._build_dashboard_page()))
        self.pages.addWidget(self._scrollable(self._build_monitor_page()))
        self.pages.addWidget(self._build_placeholder_page("Backup & Restore"))
        self.pages.addWidget(self._build_placeholder_page("System Diagnostics"))
        self.pages.addWidget(self._build_placeholder_page("Settings"))

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.sidebar)
        layout.addWidget(self.pages, 1)
        self.setCentralWidget(central)
        self.setStatusBar(QStatusBar())

        # The orchestrator notifies from the GUI thread; route through a signal
        # so rendering stays inside Qt's event flow.
        self.state_changed.connect(self._render)
        self._unsubscribe = orchestrator.subscribe(self.state_changed.emit)
        self._render(orchestrator.state, orchestrator.activity)

        self.sidebar.currentRowChanged.connect(self._on_page_selected)
        self.sidebar.setCurrentRow(self.PAGE_DASHBOARD)
        logger.info("UI initialised")

    # Page construction ---------------------------------------------------
    def _scrollable(self, page: QWidget) -> QScrollArea:
        area = QScrollArea()
        area.setWidgetResizable(True)
        area.setFrameShape(QFrame.Shape.NoFrame)
        area.setWidget(page)
        return area

    def _header(self, layout: QVBoxLayout, title: str, subtitle: str | None = None) -> None:
        title_label = QLabel(title)
        title_label.setObjectName("pageTitle")
        layout.addWidget(title_label)
        if subtitle:
            subtitle_label = QLabel(subtitle)
            subtitle_label.setObjectName("secondaryText")
            layout.addWidget(subtitle_label)

    def _section(self, layout: QVBoxLayout, title: str) -> None:
        label = QLabel(title)
        label.setObjectName("sectionTitle")
        layout.addSpacing(12)
        layout.addWidget(label)

    def _build_dashboard_page(self) -> QWidget:
        page = QWidget()
        vbox = QVBoxLayout(page)
        vbox.setSpacing(10)
        self._header(vbox, "HiDPI Configuration", "Optimize your display resolution for better visual quality")

        style = self.style()
        cards = QHBoxLayout()
        self.system_status_card = _Card(
            "System Status", "", "statusCard", style.standardIcon(QStyle.StandardPixmap.SP_DialogApplyButton)
        )
        self.hidpi_status_card = _Card(
            "HiDPI Status", "", "statusCard", style.standardIcon(QStyle.StandardPixmap.SP_DesktopIcon)
        )
        self.backup_status_card = _Card(
            "Backup Status", "", "statusCard", style.standardIcon(QStyle.StandardPixmap.SP_DriveHDIcon)
        )
        for card in (self.system_status_card, self.hidpi_status_card, self.backup_status_card):
            cards.addWidget(card)
        vbox.addLayout(cards)

        self._section(vbox, "Quick Actions")
        actions = QHBoxLayout()
        self.auto_configure_button = self._action_button(
            "Auto Configure", "Detect and configure automatically", QStyle.StandardPixmap.SP_BrowserReload
        )
        self.manual_setup_button = self._action_button(
            "Manual Setup", "Configure manually", QStyle.StandardPixmap.SP_FileDialogDetailedView
        )
        self.diagnostics_button = self._action_button(
            "Run Diagnostics", "Check system health", QStyle.StandardPixmap.SP_MessageBoxInformation
        )
        self.auto_configure_button.clicked.connect(self._on_auto_configure_clicked)
        self.manual_setup_button.clicked.connect(self._on_manual_setup_clicked)
        self.diagnostics_button.clicked.connect(self._on_run_diagnostics_clicked)
        for button in (self.auto_configure_button, self.manual_setup_button, self.diagnostics_button):
            actions.addWidget(button)
        vbox.addLayout(actions)

        self._section(vbox, "Recent Activity")
        self.activity_table = QTableView()
        self.activity_table.setModel(self._activity_model)
        self.activity_table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.activity_table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.activity_table.verticalHeader().setVisible(False)
        self.activity_table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.activity_table.setMinimumHeight(220)
        vbox.addWidget(self.activity_table, 1)
        return page

    def _action_button(self, title: str, subtitle: str, pixmap: QStyle.StandardPixmap) -> QPushButton:
        button = QPushButton(f"{title}\n{subtitle}")
        button.setObjectName("actionButton")
        button.setIcon(self.style().standardIcon(pixmap))
        button.setMinimumHeight(64)
        return button

    def _build_monitor_page(self) -> QWidget:
        page = QWidget()
        vbox = QVBoxLayout(page)
        vbox.setSpacing(10)
        self._header(vbox, "Monitor Configuration", "Configure HiDPI settings for your display")

        self._section(vbox, "Monitor Information")
        info = QHBoxLayout()
        self.vendor_card = _Card("Vendor ID", "", "infoCard")
        self.product_card = _Card("Product ID", "", "infoCard")
        self.monitor_name_card = _Card("Monitor Name", "", "infoCard")
        for card in (self.vendor_card, self.product_card, self.monitor_name_card):
            info.addWidget(card)
        vbox.addLayout(info)

        self._section(vbox, "Configuration Options")
        vbox.addWidget(QLabel("Resolution"))
        self.resolution_combo = QComboBox()
        self.resolution_combo.addItems(RESOLUTIONS)
        self.resolution_combo.setCurrentText(DEFAULT_RESOLUTION)
        self.resolution_combo.setMaximumWidth(200)
        vbox.addWidget(self.resolution_combo)

        vbox.addWidget(QLabel("Display Icon"))
        icon_grid = QGridLayout()
        self.icon_group = QButtonGroup(self)
        self.icon_group.setExclusive(True)
        for position, icon in enumerate(DisplayIcon):
            button = QPushButton(icon.label)
            button.setObjectName("iconButton")
            button.setCheckable(True)
            button.setProperty("icon_tag", icon.value)
            button.setChecked(icon is DEFAULT_ICON)
            self.icon_group.addButton(button)
            icon_grid.addWidget(button, position // 3, position % 3)
        vbox.addLayout(icon_grid)

        vbox.addWidget(QLabel("Custom Monitor Name"))
        self.custom_name_edit = QLineEdit()
        self.custom_name_edit.setPlaceholderText("Enter custom name (optional)")
        vbox.addWidget(self.custom_name_edit)

        buttons = QHBoxLayout()
        apply_button = QPushButton("Apply Configuration")
        apply_button.setDefault(True)
        reset_button = QPushButton("Reset to Defaults")
        apply_button.clicked.connect(self._on_apply_clicked)
        reset_button.clicked.connect(self._on_reset_clicked)
        buttons.addWidget(apply_button)
        buttons.addWidget(reset_button)
        buttons.addStretch(1)
        vbox.addLayout(buttons)
        vbox.addStretch(1)
        return page

    def _build_placeholder_page(self, title: str) -> QWidget:
        page = QWidget()
        vbox = QVBoxLayout(page)
        vbox.addStretch(1)
        title_label = QLabel(title)
        title_label.setObjectName("pageTitle")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint = QLabel("Coming soon...")
        hint.setObjectName("secondaryText")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        vbox.addWidget(title_label)
        vbox.addWidget(hint)
        vbox.addStretch(1)
        return page

    # Rendering -----------------------------------------------------------
    def _render(self, state: SystemState, activity: Sequence[ActivityRecord]) -> None:
        self.system_status_card.set_value(state.system_status)
        self.hidpi_status_card.set_value(state.hidpi_status)
        self.backup_status_card.set_value(state.backup_status)
        self.vendor_card.set_value(state.vendor_id)
        self.product_card.set_value(state.product_id)
        self.monitor_name_card.set_value(state.monitor_name)
        self._activity_model.set_records(activity)
        if activity:
            latest = activity[0]
            self.statusBar().showMessage(f"{latest.title}: {latest.description}")

    def selected_icon_tag(self) -> str:
        button = self.icon_group.checkedButton()
        if button is None:
            return DEFAULT_ICON.value
        return str(button.property("icon_tag"))

    # Slots -----------------------------------------------------------------
    def _on_page_selected(self, row: int) -> None:
        """Show page ``row``; entering the Dashboard always re-reads system info.

        The reload resets the HiDPI and backup status to their fresh-load values
        and adds two records to the activity log, each time the page is entered.
        """
        self.pages.setCurrentIndex(row)
        if row == self.PAGE_DASHBOARD:
            self._orchestrator.load_system_info()

    def _on_auto_configure_clicked(self) -> None:
        self._orchestrator.auto_configure()

    def _on_manual_setup_clicked(self) -> None:
        self._orchestrator.manual_setup()
        self.sidebar.setCurrentRow(self.PAGE_MONITOR)

    def _on_run_diagnostics_clicked(self) -> None:
        self._orchestrator.run_diagnostics()

    def _on_apply_clicked(self) -> None:
        try:
            self._orchestrator.apply_configuration(
                self.resolution_combo.currentText(),
                self.selected_icon_tag(),
                self.custom_name_edit.text().strip(),
            )
        except ValueError as exc:
            QMessageBox.warning(self, "Invalid Configuration", str(exc))

    def _on_reset_clicked(self) -> None:
        self._orchestrator.reset_configuration()

    def closeEvent(self, event) -> None:  # noqa: N802
        self._unsubscribe()
        super().closeEvent(event)
