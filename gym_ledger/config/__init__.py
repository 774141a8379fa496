"""
Configuration package for the gym ledger engine.

This package contains the environment settings and the logging setup.
"""

from gym_ledger.config.settings import Settings, settings, get_settings
from gym_ledger.config.logging import setup_logging

__all__ = ['Settings', 'settings', 'get_settings', 'setup_logging']
