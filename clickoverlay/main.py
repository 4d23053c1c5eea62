"""Application bootstrap / CLI."""

from __future__ import annotations

import argparse
import os
import signal
import sys

from loguru import logger
from pydantic import ValidationError

from .config import (
    CONFIG_ENV,
    DEFAULT_CONFIG_NAME,
    AppConfig,
    LoggingConfig,
    dump_config,
    load_config,
)
from .errors import ConfigError, HookStartError
from .indicators.hook import MouseHookAdapter
from .indicators.queue import EventQueue
from .indicators.service import OverlayService
from .logging_utils import configure_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="clickoverlay")
    p.add_argument(
        "--config",
        default=os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_NAME),
        help=f"Path to config YAML (default: {DEFAULT_CONFIG_NAME} or {CONFIG_ENV}).",
    )
    p.add_argument("--log-level", default=None, help="Override the configured log level.")
    sub = p.add_subparsers(dest="cmd", required=False)

    sub.add_parser("run", help="Show the click indicator overlay (default).")
    sub.add_parser("doctor", help="Check that the global mouse hook can be installed.")
    sub.add_parser("print-config", help="Load config and print resolved values.")

    return p.parse_args(argv)


def _doctor(config: AppConfig) -> int:
    hook = MouseHookAdapter(
        EventQueue(),
        track_motion=config.hook.track_motion,
        start_timeout_s=config.hook.start_timeout_s,
    )
    try:
        hook.start()
    except HookStartError as exc:
        logger.error("Global mouse hook check failed: {}", exc)
        logger.info("Doctor result: FAILED")
        return 2
    hook.stop()
    logger.info("Doctor result: OK")
    return 0


def _run(config: AppConfig) -> int:
    if not config.ui.enabled:
        # The overlay timer is the only consumer; without it the queue only grows.
        logger.error("Cannot run with ui.enabled=false: nothing would drain input events")
        return 2

    from PySide6 import QtCore, QtWidgets

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv[:1])
    service = OverlayService(config)
    try:
        service.start()
    except HookStartError as exc:
        logger.error("Cannot start overlay: {}", exc)
        return 2
    if not service.ui_active:
        logger.error("Overlay UI failed to start; stopping the mouse hook")
        service.stop()
        return 2

    signal.signal(signal.SIGINT, lambda *_args: app.quit())
    # Give the interpreter a chance to run signal handlers inside the Qt loop.
    heartbeat = QtCore.QTimer()
    heartbeat.timeout.connect(lambda: None)
    heartbeat.start(250)

    logger.info("clickoverlay running. Press Ctrl+C to stop.")
    try:
        return int(app.exec())
    finally:
        heartbeat.stop()
        service.stop()


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = _parse_args(argv)
    cmd = args.cmd or "run"

    try:
        config = load_config(args.config)
        if args.log_level:
            config.logging = LoggingConfig.model_validate(
                {**config.logging.model_dump(), "level": args.log_level}
            )
    except (ConfigError, ValidationError) as exc:
        configure_logging(level="INFO")
        logger.error("Invalid configuration: {}", exc)
        return 2
    configure_logging(config.logging.resolved_log_dir(), config.logging.level)

    if cmd == "print-config":
        sys.stdout.write(dump_config(config))
        return 0

    if cmd == "doctor":
        return _doctor(config)

    return _run(config)


if __name__ == "__main__":
    raise SystemExit(main())
