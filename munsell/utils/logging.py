"""
Munsell Structured Logging
Centralized logging configuration using loguru.

The package is disabled in loguru on import; call enable_logging() to get
its records on stderr.
"""
import sys
from typing import Dict, Any, Optional

from loguru import logger

from munsell.config import config


class StructuredLogger:
    """Structured logger for the munsell classifier."""

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        if extra:
            logger.bind(**extra).info(message)
        else:
            logger.info(message)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with optional extra data."""
        if extra:
            logger.bind(**extra).warning(message)
        else:
            logger.warning(message)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        if extra:
            logger.bind(**extra).debug(message)
        else:
            logger.debug(message)


# Global logger instance
_logger: Optional[StructuredLogger] = None

# Sink installed by enable_logging(); other sinks belong to the host program
_handler_id: Optional[int] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger


def enable_logging(level: Optional[str] = None, serialize: Optional[bool] = None) -> int:
    """
    Turn on munsell log records and add a stderr sink for them.

    Args:
        level: loguru level name, defaults to MUNSELL_LOG_LEVEL
        serialize: emit JSON lines, defaults to MUNSELL_LOG_SERIALIZE

    Returns:
        Handler id of the installed sink
    """
    global _handler_id
    requested = (level or config.LOG_LEVEL).upper()
    resolved = requested if config.validate_log_level(requested) else config.LOG_LEVEL

    if _handler_id is not None:
        logger.remove(_handler_id)

    logger.enable("munsell")
    _handler_id = logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message} | {extra}",
        level=resolved,
        serialize=config.LOG_SERIALIZE if serialize is None else serialize,
        filter="munsell"
    )

    if resolved != requested:
        get_logger().warning(f"Invalid log level {requested!r}, using {resolved}")
    get_logger().info("munsell logging enabled", extra={"level": resolved})
    return _handler_id


def disable_logging() -> None:
    """Remove the munsell sink and silence munsell records again."""
    global _handler_id
    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None
    logger.disable("munsell")
