from hidpi_configurator.models.system_state import SystemState, parse_system_info


def test_defaults():
    state = SystemState()
    assert state.system_status == "Checking..."
    assert state.hidpi_status == "Unknown"
    assert state.backup_status == "Unknown"
    assert state.vendor_id == state.product_id == state.monitor_name == "Unknown"


def test_parse_all_labels():
    values = parse_system_info("Vendor ID: ABC123\nProduct ID: XYZ\nMonitor Name: Dell U2720Q")
    assert values == {"vendor_id": "ABC123", "product_id": "XYZ", "monitor_name": "Dell U2720Q"}


def test_parse_ignores_noise_and_order():
    output = "\n".join(
        [
            "Scanning displays...",
            "  Monitor Name: LG UltraFine\r",
            "random line",
            "Vendor ID: 1e6d",
        ]
    )
    values = parse_system_info(output)
    assert values == {"monitor_name": "LG UltraFine", "vendor_id": "1e6d"}


def test_parse_splits_on_first_separator_only():
    values = parse_system_info("Monitor Name: Studio: Left")
    assert values["monitor_name"] == "Studio: Left"


def test_parse_skips_label_without_separator():
    assert parse_system_info("Vendor ID:ABC") == {}


def test_parse_last_occurrence_wins():
    values = parse_system_info("Product ID: 1\nProduct ID: 2")
    assert values["product_id"] == "2"


def test_parse_empty_output():
    assert parse_system_info("") == {}


def test_parse_keeps_value_verbatim():
    values = parse_system_info("Monitor Name:  Padded Name \r\nVendor ID: 10ac\t")
    assert values == {"monitor_name": " Padded Name ", "vendor_id": "10ac\t"}


def test_to_dict_lists_every_field():
    state = SystemState(vendor_id="10ac")
    assert state.to_dict() == {
        "system_status": "Checking...",
        "hidpi_status": "Unknown",
        "backup_status": "Unknown",
        "vendor_id": "10ac",
        "product_id": "Unknown",
        "monitor_name": "Unknown",
    }
