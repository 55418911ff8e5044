from __future__ import annotations

import configparser
import logging
from pathlib import Path

from platformdirs import user_config_dir

from richfind.domain.interfaces import IConfigService
from richfind.utils.constants import APP_DIR, CONFIG_FILE

logger = logging.getLogger(__name__)

_TRUE = frozenset({"1", "true", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "no", "n", "off"})


def config_candidates(explicit_path: Path | None = None, project_root: Path | None = None) -> list[Path]:
    r"""
    Config files in priority order:
      1. Explicit path provided by the caller
      2. User config dir (e.g. ~/.config/richfind/config.ini or %APPDATA%\richfind\config.ini)
      3. Project default at <repo>/config/config.ini
    """
    paths = [explicit_path] if explicit_path else []
    paths.append(Path(user_config_dir(APP_DIR)) / CONFIG_FILE)
    if project_root:
        paths.append(project_root / "config" / CONFIG_FILE)
    return paths


class IniConfigService(IConfigService):
    """Reads the first parseable INI file among the candidates; missing keys fall back to defaults."""

    def __init__(self, explicit_path: Path | None = None, project_root: Path | None = None):
        self._parser = configparser.ConfigParser()
        for path in config_candidates(explicit_path, project_root):
            if path.exists() and self._load(path):
                logger.debug("Loaded configuration from %s", path)
                break

    def _load(self, path: Path) -> bool:
        parser = configparser.ConfigParser()
        try:
            with path.open("r", encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, configparser.Error) as exc:
            logger.warning("Ignoring unreadable config %s: %s", path, exc)
            return False
        self._parser = parser
        return True

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        if not self._parser.has_section(section):
            return default
        return self._parser[section].get(key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        raw = self.get(section, key)
        if raw is None:
            return default
        word = raw.strip().lower()
        if word in _TRUE:
            return True
        if word in _FALSE:
            return False
        return default
