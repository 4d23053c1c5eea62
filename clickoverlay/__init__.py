"""Click-through overlay that shows which mouse buttons are held."""

from __future__ import annotations

from .config import AppConfig, load_config
from .logging_utils import configure_logging

__all__ = [
    "AppConfig",
    "load_config",
    "configure_logging",
]
