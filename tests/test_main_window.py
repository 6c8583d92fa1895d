from __future__ import annotations

import pytest

QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from hidpi_configurator.io.script import ScriptMode  # noqa: E402
from hidpi_configurator.ui.main_window import MainWindow  # noqa: E402


@pytest.fixture
def window(qt_app, fake_script, orchestrator):
    fake_script.outputs[ScriptMode.INFO] = "Vendor ID: 10ac\nProduct ID: a0c4\nMonitor Name: DELL U2720Q"
    main_window = MainWindow(orchestrator)
    yield main_window
    main_window.close()
    main_window.deleteLater()


def test_dashboard_loads_system_info_on_startup(window, fake_script):
    assert fake_script.calls == [("--info",)]
    assert window.pages.currentIndex() == MainWindow.PAGE_DASHBOARD
    assert window.system_status_card.value_label.text() == "Ready"
    assert window.vendor_card.value_label.text() == "10ac"
    assert window.monitor_name_card.value_label.text() == "DELL U2720Q"


def test_manual_setup_logs_and_opens_monitor_page(window, fake_script):
    window._on_manual_setup_clicked()

    assert window.pages.currentIndex() == MainWindow.PAGE_MONITOR
    assert fake_script.calls == [("--info",)]
    assert window._orchestrator.activity[0].title == "Manual Setup"
    assert window._activity_model.record_at(0).title == "Manual Setup"


def test_apply_sends_form_values(window, fake_script):
    window.resolution_combo.setCurrentText("3840x2160")
    window.custom_name_edit.setText("  Office Monitor ")
    window._on_apply_clicked()

    assert fake_script.calls[-1] == ("--configure", "3840x2160", "macbook", "Office Monitor")
    assert window.hidpi_status_card.value_label.text() == "Configured"


def test_invalid_apply_warns_and_launches_nothing(window, fake_script, monkeypatch):
    warnings = []
    monkeypatch.setattr(QtWidgets.QMessageBox, "warning", lambda *args: warnings.append(args))
    monkeypatch.setattr(window, "selected_icon_tag", lambda: "thinkpad")
    records_before = len(window._orchestrator.activity)

    window._on_apply_clicked()

    assert len(warnings) == 1
    assert warnings[0][1] == "Invalid Configuration"
    assert "thinkpad" in warnings[0][2]
    assert fake_script.calls == [("--info",)]
    assert len(window._orchestrator.activity) == records_before


def test_returning_to_dashboard_reloads_system_info(window, fake_script):
    window._on_auto_configure_clicked()
    assert window.hidpi_status_card.value_label.text() == "Configured"

    window.sidebar.setCurrentRow(MainWindow.PAGE_MONITOR)
    window.sidebar.setCurrentRow(MainWindow.PAGE_DASHBOARD)

    assert fake_script.calls == [("--info",), ("--auto",), ("--info",)]
    assert window.hidpi_status_card.value_label.text() == "Not configured"
    assert [record.title for record in window._orchestrator.activity[:2]] == ["System Info", "System Info"]
