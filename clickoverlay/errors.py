"""Exception types raised across clickoverlay."""

from __future__ import annotations


class ClickOverlayError(RuntimeError):
    """Base class for clickoverlay failures."""


class HookStartError(ClickOverlayError):
    """The global mouse hook could not be installed.

    Fatal: the overlay has nothing to show without global input visibility.
    """


class ConfigError(ClickOverlayError):
    """The configuration file could not be read or is not a mapping."""
