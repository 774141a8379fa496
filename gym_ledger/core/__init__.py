"""Core engine plumbing: logging access and exceptions."""

from gym_ledger.core.exceptions import BaseAppException, PreconditionError
from gym_ledger.core.logging import LoggerAdapter, get_logger

__all__ = ["BaseAppException", "PreconditionError", "LoggerAdapter", "get_logger"]
