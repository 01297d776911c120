"""Input/output helpers for :mod:`person_records`."""

from .people_loader import parse_all, parse_line
from .settings_loader import Settings, apply_settings, load_settings

__all__ = [
    "parse_line",
    "parse_all",
    "Settings",
    "load_settings",
    "apply_settings",
]
