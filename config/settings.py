"""
File: config/settings.py
Purpose: Centralized configuration and constants
Dependencies: os, dotenv
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# =============================================================================
# TELEGRAM BOT CONFIGURATION
# =============================================================================
BOT_TOKEN = os.environ.get('BOT_TOKEN')

# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================
DATABASE_URL = os.environ.get('DATABASE_URL')
SQLITE_PATH = os.environ.get('SQLITE_PATH', 'res.db')  # Fallback for local testing

# =============================================================================
# OEKAKI (DRAWING) CONFIGURATION
# =============================================================================
OEKAKI_URL_PREFIX = os.environ.get('OEKAKI_URL_PREFIX', '')
OEKAKI_EXTENSION = '.png'

# =============================================================================
# REPLY CONFIGURATION
# =============================================================================
MESSAGE_CHUNK_LIMIT = int(os.environ.get('MESSAGE_CHUNK_LIMIT', 1800))  # chars per message
MAX_REPLY_CHUNKS = int(os.environ.get('MAX_REPLY_CHUNKS', 5))  # messages per request
MAX_RESOLVED_POSTS = int(os.environ.get('MAX_RESOLVED_POSTS', 1000))  # posts per request
DISPLAY_TIMEZONE = os.environ.get('DISPLAY_TIMEZONE', 'Asia/Tokyo')

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
LOG_FILE = 'bot.log'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def validate_settings():
    """Fail fast on missing required settings (called from main)"""
    if not BOT_TOKEN:
        raise ValueError("❌ BOT_TOKEN must be set in environment variables!")
