"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console and optional file handler.  Log format includes the
timestamp, log level, logger name, the correlation id of the request
being served and the message.  The correlation id lives in a
context variable that the correlation middleware sets for the
duration of each request; records emitted outside a request show
``-`` instead.
"""

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Optional

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class CorrelationIdFormatter(logging.Formatter):
    """Formatter that injects the current correlation id into records."""

    def format(self, record: logging.LogRecord) -> str:
        if "correlation_id" not in record.__dict__:
            record.__dict__["correlation_id"] = correlation_id_var.get() or "-"
        return super().format(record)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a
    console handler and optionally a file handler.  The root
    logger's level is set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by pytest or a repeated create_app call.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = CorrelationIdFormatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s [%(correlation_id)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
