"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Any, Dict, Optional, TextIO

import structlog
from rich.console import Console
from rich.logging import RichHandler

from inclusive_hiring.config import settings


def configure_logging(stream: Optional[TextIO] = None, cache_loggers: bool = True) -> None:
    """Configure structured logging with rich output.

    Args:
        stream: Log destination, stdout by default. The CLI passes stderr so
            command output stays machine readable.
    """
    stream = stream or sys.stdout

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.log_level.upper()),
        handlers=[RichHandler(console=Console(file=stream), rich_tracebacks=True, markup=True)],
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.upper())
        ),
        logger_factory=structlog.WriteLoggerFactory(file=stream),
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def log_text_summary(text: str, **kwargs: Any) -> Dict[str, Any]:
    """Create a log context describing free text without including it."""
    return {
        "text_length": len(text or ""),
        "word_count": len((text or "").split()),
        **{k: v for k, v in kwargs.items() if not k.startswith("_")},
    }
