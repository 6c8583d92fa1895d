"""Display configuration choices offered to the user."""
from __future__ import annotations

import re
from enum import Enum
from typing import List

RESOLUTIONS: List[str] = [
    "1920x1080",
    "2560x1440",
    "3840x2160",
    "1366x768",
    "2560x1600",
    "3024x1964",
    "3456x2234",
    "3440x1440",
]
DEFAULT_RESOLUTION = RESOLUTIONS[0]

_RESOLUTION_PATTERN = re.compile(r"[1-9]\d*x[1-9]\d*")


class DisplayIcon(str, Enum):
    """Icons the configuration script can assign to a display."""

    MACBOOK = "macbook"
    MACBOOK_PRO = "macbookpro"
    IMAC = "imac"
    LG = "lg"
    PRO_XDR = "proxdr"

    @property
    def label(self) -> str:
        return _ICON_LABELS[self]


_ICON_LABELS = {
    DisplayIcon.MACBOOK: "MacBook",
    DisplayIcon.MACBOOK_PRO: "MacBook Pro",
    DisplayIcon.IMAC: "iMac",
    DisplayIcon.LG: "LG Display",
    DisplayIcon.PRO_XDR: "Pro Display XDR",
}

DEFAULT_ICON = DisplayIcon.MACBOOK


def validate_resolution(resolution: str) -> str:
    """Return ``resolution`` if it looks like ``<width>x<height>``."""
    if not _RESOLUTION_PATTERN.fullmatch(resolution):
        raise ValueError(f"Invalid resolution {resolution!r}; expected WIDTHxHEIGHT")
    return resolution


def parse_icon(icon: DisplayIcon | str) -> DisplayIcon:
    try:
        return DisplayIcon(icon)
    except ValueError:
        choices = ", ".join(member.value for member in DisplayIcon)
        raise ValueError(f"Unknown display icon {icon!r}; expected one of {choices}") from None
