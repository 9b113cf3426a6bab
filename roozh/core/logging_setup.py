from __future__ import annotations

import faulthandler
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import IO

from roozh.core.paths import app_dir

LOG_DIR = app_dir() / "logs"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "ROOZH_LOG_LEVEL"

_FAULT_FILE: IO[str] | None = None


def resolve_level(value: str | int | None = None) -> int:
    """Map a level name or number to a logging level, defaulting to INFO.

    ``None`` reads ``ROOZH_LOG_LEVEL`` from the environment.
    """
    if value is None:
        value = os.getenv(LOG_LEVEL_ENV, "")
    if isinstance(value, int):
        return value
    name = str(value).strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str | int | None = None) -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    app_handler = RotatingFileHandler(
        LOG_DIR / "app.log",
        maxBytes=1_000_000,
        backupCount=3,
        encoding="utf-8",
    )
    app_handler.setFormatter(formatter)

    error_handler = RotatingFileHandler(
        LOG_DIR / "crash.log",
        maxBytes=1_000_000,
        backupCount=2,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    logging.basicConfig(
        level=resolve_level(level),
        handlers=[app_handler, error_handler],
    )
    logging.captureWarnings(True)


def install_error_hooks() -> None:
    """Route uncaught, thread and unraisable exceptions into the log."""

    def on_uncaught(exc_type, exc_value, exc_traceback) -> None:
        logging.getLogger("UnhandledException").error(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_traceback),
        )
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    def on_thread(args: threading.ExceptHookArgs) -> None:
        logging.getLogger("ThreadException").error(
            "Unhandled exception in thread %s",
            getattr(args.thread, "name", "?"),
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    def on_unraisable(unraisable) -> None:  # noqa: ANN001
        logging.getLogger("UnraisableException").error(
            "Unraisable exception in %r",
            unraisable.object,
            exc_info=(
                unraisable.exc_type,
                unraisable.exc_value,
                unraisable.exc_traceback,
            ),
        )

    sys.excepthook = on_uncaught
    threading.excepthook = on_thread
    sys.unraisablehook = on_unraisable


def enable_fault_log() -> None:
    global _FAULT_FILE
    logger = logging.getLogger("CrashLogger")
    fault_path = LOG_DIR / "faults.log"
    try:
        fault_path.parent.mkdir(parents=True, exist_ok=True)
        _FAULT_FILE = open(fault_path, "a", encoding="utf-8", buffering=1)
        faulthandler.enable(file=_FAULT_FILE, all_threads=True)
    except OSError:
        logger.exception("Failed to enable fault logging")
        return
    logger.info("Fault logging enabled at %s", fault_path)
