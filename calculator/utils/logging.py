"""Logging configuration for the calculator."""

import logging
import sys

import structlog


def setup_logging(level: str = "INFO", json_logs: bool = False) -> structlog.stdlib.BoundLogger:
    """Set up structlog on top of the stdlib root logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = get_logger("logging")
    logger.debug("Logging configured", level=level, json=json_logs)
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance for the given name."""
    if not name.startswith("calculator"):
        name = f"calculator.{name}"
    return structlog.get_logger(name)
