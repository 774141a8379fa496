"""
Logger access for engine modules.

Engines obtain loggers through get_logger() so that bound context
(member, membership type, salary month) travels with every record.
"""

import logging
from typing import Any, Dict, Optional


class LoggerAdapter:
    """Enhanced logger adapter with context management"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self._context: Dict[str, Any] = {}

    def add_context(self, **kwargs):
        """Add context to all log messages"""
        self._context.update(kwargs)
        return self

    def clear_context(self):
        """Clear all context"""
        self._context.clear()
        return self

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def _log(self, level: int, message: str, *args, **kwargs):
        """Internal log method with context"""
        extra = dict(self._context)
        extra.update(kwargs.get('extra') or {})
        kwargs['extra'] = extra

        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs):
        self._log(logging.CRITICAL, message, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    """
    Get logger instance.

    Args:
        name: Logger name, placed under the ``gym_ledger`` namespace

    Returns:
        Enhanced logger adapter
    """
    if not name:
        name = "gym_ledger"
    elif not name.startswith("gym_ledger"):
        name = f"gym_ledger.{name}"

    return LoggerAdapter(logging.getLogger(name))


__all__ = [
    'get_logger',
    'LoggerAdapter',
]
