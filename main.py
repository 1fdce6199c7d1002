"""
File: main.py
Location: res_range_bot/main.py
Purpose: Main entry point for the bot
"""

import sys
import logging
from telegram.ext import Application
from telegram import Update

from config.settings import BOT_TOKEN, LOG_LEVEL, LOG_FILE, LOG_FORMAT, validate_settings

# Setup logging
if sys.platform == 'win32':
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

logging.basicConfig(
    format=LOG_FORMAT,
    level=LOG_LEVEL,
    handlers=[
        logging.FileHandler(LOG_FILE, encoding='utf-8'),
        logging.StreamHandler(sys.stdout)
    ]
)
# Telegram polling logs every getUpdates request at INFO
logging.getLogger('httpx').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

from database.db_manager import DatabaseManager
from database.res_db import ResDB
from handlers import register_all_handlers

async def on_error(update, context):
    """Log handler exceptions instead of dropping them"""
    logger.error(f"❌ Unhandled error for update {update}: {context.error}", exc_info=context.error)

def main():
    """Main entry point"""
    validate_settings()

    logger.info("="*60)
    logger.info("🚀 RES RANGE BOT")
    logger.info("="*60)

    # Initialize database
    db_manager = DatabaseManager()
    db_manager.init_database()
    res_db = ResDB(db_manager)

    # Create Telegram application
    app = Application.builder().token(BOT_TOKEN).build()

    # Register handlers
    register_all_handlers(app, res_db)
    app.add_error_handler(on_error)

    logger.info(f"📚 Posts stored: {res_db.count_res()} (newest #{res_db.get_max_post_number()})")
    logger.info(f"🗄️ Database: {'PostgreSQL' if db_manager.is_postgres() else 'SQLite'}")
    logger.info("="*60)

    # Start bot
    app.run_polling(allowed_updates=Update.ALL_TYPES)

if __name__ == "__main__":
    main()
