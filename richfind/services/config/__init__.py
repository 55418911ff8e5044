from .find_config import FindConfig, build_find_config
from .ini_config_service import IniConfigService, config_candidates

__all__ = ["FindConfig", "IniConfigService", "build_find_config", "config_candidates"]
