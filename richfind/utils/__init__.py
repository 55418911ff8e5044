"""App constants."""

from .constants import (
    APP_DIR,
    APP_NAME,
    CONFIG_FILE,
    DEFAULT_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_SCROLL_INTO_VIEW,
    ROOT_LOGGER,
    SECTION_FIND,
    SECTION_LOGGING,
)

__all__ = [
    "APP_NAME",
    "APP_DIR",
    "CONFIG_FILE",
    "SECTION_FIND",
    "KEY_SCROLL_INTO_VIEW",
    "SECTION_LOGGING",
    "KEY_LOG_LEVEL",
    "DEFAULT_LOG_LEVEL",
    "ROOT_LOGGER",
]
