APP_NAME = "richfind"
APP_DIR = "richfind"
CONFIG_FILE = "config.ini"

SECTION_FIND = "find"
KEY_SCROLL_INTO_VIEW = "scroll_into_view"

SECTION_LOGGING = "logging"
KEY_LOG_LEVEL = "level"
DEFAULT_LOG_LEVEL = "WARNING"

# Logger that every module logger in the package hangs off.
ROOT_LOGGER = "richfind"
