"""Logging helpers for the client library.

Library loggers only carry a ``NullHandler`` and propagate to the root
logger, so records follow whatever logging the application sets up.
``configure_logger`` is the opt-in for callers who want this package to
write to stderr on its own.
"""
from __future__ import annotations

import json
import logging
from logging import Logger
from typing import Optional


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logger(name: str, level: str = "INFO", json_output: bool = True) -> Logger:
    """Attach a single stderr handler to ``name`` and stop propagation."""
    logger = logging.getLogger(name)
    if any(not isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        return logger

    logger.setLevel(_level(level))
    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> Logger:
    """Return a library logger, optionally pinning its level."""
    logger = logging.getLogger(name or "anthropic_api")
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    if level is not None:
        logger.setLevel(_level(level))
    return logger
