"""Structlog configuration for profilepage."""

import logging
import sys

import structlog

from profilepage.config import PageConfig, LogFormat


def _stderr_logger(*args) -> structlog.PrintLogger:
    """Print logger bound to the current sys.stderr, leaving stdout to command output."""
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(config: PageConfig | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Args:
        config: PageConfig instance, uses defaults if None
    """
    if config is None:
        config = PageConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name for context

    Returns:
        Configured structlog BoundLogger
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
