"""Top-level package for person_records."""

import logging

__version__ = "0.1.0"

logger = logging.getLogger("person_records")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

from .models import Person  # noqa: E402
from .io import load_settings, parse_all, parse_line  # noqa: E402

__all__ = ["logger", "Person", "parse_line", "parse_all", "load_settings"]
