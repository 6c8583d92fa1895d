"""Observable display-configuration state."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

CHECKING = "Checking..."
UNKNOWN = "Unknown"

STATUS_READY = "Ready"
STATUS_INFO_ERROR = "Error loading system info"
HIDPI_CONFIGURED = "Configured"
HIDPI_NOT_CONFIGURED = "Not configured"
BACKUP_NONE = "No backups found"

# Label substring -> SystemState attribute.
INFO_LABELS: Dict[str, str] = {
    "Vendor ID:": "vendor_id",
    "Product ID:": "product_id",
    "Monitor Name:": "monitor_name",
}


@dataclass(slots=True)
class SystemState:
    """Status fields rendered by the dashboard and monitor pages."""

    system_status: str = CHECKING
    hidpi_status: str = UNKNOWN
    backup_status: str = UNKNOWN
    vendor_id: str = UNKNOWN
    product_id: str = UNKNOWN
    monitor_name: str = UNKNOWN

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def parse_system_info(output: str) -> Dict[str, str]:
    """Scan ``--info`` output for the known monitor labels.

    Returns a mapping of state attribute to value for every label found. Lines
    without a known label, or without a ``": "`` separator, are skipped. When a
    label repeats, the last occurrence wins. Values are kept verbatim.
    """
    values: Dict[str, str] = {}
    for line in output.splitlines():
        for label, attribute in INFO_LABELS.items():
            if label not in line:
                continue
            _, separator, value = line.partition(": ")
            if separator:
                values[attribute] = value
            break
    return values
