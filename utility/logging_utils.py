# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Updated: 2026-10-19
# Description: logging_utils.py
# -----------------------------------------------------------------------------
import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

import colorlog

import settings

BASE_LOGGER_NAME = "recipe_search"

_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers are built once and shared by every recipe_search.* logger,
# so all loggers write through a single rotating file.
_handlers: Optional[List[logging.Handler]] = None
_handlers_lock = threading.Lock()


def _console_handler() -> logging.Handler:
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        fmt=(
            "%(log_color)s%(asctime)s %(levelname)-8s%(reset)s "
            "%(blue)s%(name)s:%(lineno)d%(reset)s %(message_log_color)s%(message)s"
        ),
        datefmt=_DATE_FORMAT,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
        secondary_log_colors={
            "message": {"WARNING": "yellow", "ERROR": "light_red", "CRITICAL": "red"},
        },
    ))
    return handler


def _file_handler(path: str) -> logging.Handler:
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _shared_handlers() -> List[logging.Handler]:
    global _handlers
    with _handlers_lock:
        if _handlers is None:
            handlers = [_console_handler()]
            if settings.LOG_TO_FILE:
                handlers.append(_file_handler(settings.LOG_FILE))
            _handlers = handlers
        return _handlers


def _create_logger(full_name: str) -> logging.Logger:
    logger = logging.getLogger(full_name)
    if logger.handlers:
        return logger

    for handler in _shared_handlers():
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the recipe_search namespace, e.g. recipe_search.health.StoreHealth."""
    full_name = f"{BASE_LOGGER_NAME}.{name}" if name else BASE_LOGGER_NAME
    return _create_logger(full_name)


def get_class_logger(cls: type) -> logging.Logger:
    """
    Logger named after module + class, e.g.:

      recipe_search.search.SemanticSearchEngine.SemanticSearchEngine
    """
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")
    return _create_logger(f"{BASE_LOGGER_NAME}.{module}.{classname}")
