"""Load reader settings from YAML files."""
from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Options shared by the readers."""

    encoding: str = "utf8"
    log_level: str = "INFO"


def _validate_settings(data: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(sorted(map(str, unknown)))}")

    for key, value in data.items():
        if not isinstance(value, str):
            raise ValueError(f"Setting '{key}' must be a string")

    settings = Settings(**data)
    try:
        codecs.lookup(settings.encoding)
    except LookupError as exc:
        raise ValueError(f"Unknown encoding: {settings.encoding!r}") from exc

    settings.log_level = settings.log_level.upper()
    if settings.log_level not in LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {', '.join(LOG_LEVELS)}, got {data['log_level']!r}"
        )
    return settings


def load_settings(path: Optional[str] = None) -> Settings:
    """Read :class:`Settings` from ``path``, falling back to defaults if it does not exist."""
    if not path or not os.path.exists(path):
        return Settings()
    with open(path, "r", encoding="utf8") as handle:
        data = yaml.safe_load(handle)

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ValueError(
            f"Settings file must contain a mapping but found {type(data).__name__}"
        )
    return _validate_settings(data)


def apply_settings(settings: Settings) -> None:
    """Apply ``settings.log_level`` to the package logger."""
    logging.getLogger("person_records").setLevel(settings.log_level)
