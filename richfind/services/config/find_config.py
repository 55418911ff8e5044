from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from richfind.domain.interfaces import IConfigService, IFindConfig
from richfind.services.config.ini_config_service import IniConfigService
from richfind.utils.constants import (
    DEFAULT_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_SCROLL_INTO_VIEW,
    SECTION_FIND,
    SECTION_LOGGING,
)


def _project_root_fallback() -> Path:
    # find_config.py -> richfind/services/config/find_config.py
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class FindConfig(IFindConfig):
    """Typed find/replace settings read from an INI config service."""

    ini: IConfigService

    def scroll_into_view(self) -> bool:
        value = self.ini.get_bool(SECTION_FIND, KEY_SCROLL_INTO_VIEW, True)
        return True if value is None else value

    def log_level(self) -> str:
        """Configured level name, falling back to WARNING for unknown names."""
        raw = (self.ini.get(SECTION_LOGGING, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL) or "").strip().upper()
        return raw if isinstance(logging.getLevelName(raw), int) else DEFAULT_LOG_LEVEL


def build_find_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> FindConfig:
    root = project_root or _project_root_fallback()
    return FindConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
