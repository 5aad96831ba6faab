VERSION = "0.1.0"

MESSAGES_FILE_NAME = "messages.po"
MISSING_FILE_NAME = "messages-missing.po"

DEFAULT_BASE_PATH = "frontend/src/locales"
DEFAULT_WRAP_WIDTH = 78

MERGED_ICON = "🔄"
DONE_ICON = "✅"
ERROR_ICON = "❌"
