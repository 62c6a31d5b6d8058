"""
Utility modules for the compatibility engine.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from compat_engine.utils.config import (
    AppSettings,
    CacheSettings,
    LoggingSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    PACKAGE_DIR,
)
from compat_engine.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    DEFAULT_WEIGHTS,
    NEUTRAL_SCORE,
    Category,
    MatchScoreLevel,
)
from compat_engine.utils.logger import (
    setup_logging,
    get_logger,
    LoggerMixin,
)

__all__ = [
    # Config
    "AppSettings",
    "CacheSettings",
    "LoggingSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "PACKAGE_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "DEFAULT_WEIGHTS",
    "NEUTRAL_SCORE",
    "Category",
    "MatchScoreLevel",
    # Logger
    "setup_logging",
    "get_logger",
    "LoggerMixin",
]
