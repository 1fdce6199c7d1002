from .settings import *
from .timezone_config import *

__all__ = [
    'BOT_TOKEN', 'DATABASE_URL', 'SQLITE_PATH',
    'OEKAKI_URL_PREFIX', 'OEKAKI_EXTENSION',
    'MESSAGE_CHUNK_LIMIT', 'MAX_REPLY_CHUNKS', 'MAX_RESOLVED_POSTS', 'DISPLAY_TIMEZONE',
    'LOG_LEVEL', 'LOG_FILE', 'LOG_FORMAT', 'validate_settings',
    'DISPLAY_TZ', 'UTC', 'utc_to_display', 'format_time_display'
]
