"""
File: handlers/command_handlers.py
Location: res_range_bot/handlers/command_handlers.py
Purpose: Command handlers (/start, /help, /res, /latest)
"""

from telegram import Update
from telegram.ext import CommandHandler, ContextTypes
import logging

logger = logging.getLogger(__name__)

USAGE_TEXT = (
    "📖 Usage: /res <posts>  (or mention me with the posts)\n\n"
    "• 123 - one post\n"
    "• 123-128 - a range\n"
    "• 990- - from 990 to the newest post\n"
    "• 123-128,^126 - exclude with ^\n"
    "• ?324 - relative: newest post with its last digits replaced\n"
    "• 123,130-135,^132,?^40 - mix them with commas"
)

async def start(update: Update, context: ContextTypes.DEFAULT_TYPE, res_db):
    """Start / help command - shows usage"""
    await update.effective_message.reply_text(USAGE_TEXT)

async def res_command(update: Update, context: ContextTypes.DEFAULT_TYPE, res_db):
    """/res <spec> - show posts"""
    from .message_handlers import reply_with_posts

    spec_text = ' '.join(context.args or [])
    await reply_with_posts(update.effective_message, spec_text, res_db)

async def latest_command(update: Update, context: ContextTypes.DEFAULT_TYPE, res_db):
    """/latest - newest post number"""
    try:
        max_no = res_db.get_max_post_number()
    except Exception as e:
        logger.error(f"❌ /latest failed: {e}")
        await update.effective_message.reply_text("❌ Database error. Try again later.")
        return

    if not max_no:
        await update.effective_message.reply_text("📭 No posts yet.")
        return

    await update.effective_message.reply_text(f"🆕 Newest post: #{max_no}")

def register_command_handlers(app, res_db):
    """Register all command handlers"""
    app.add_handler(CommandHandler("start", lambda u, c: start(u, c, res_db)))
    app.add_handler(CommandHandler("help", lambda u, c: start(u, c, res_db)))
    app.add_handler(CommandHandler("res", lambda u, c: res_command(u, c, res_db)))
    app.add_handler(CommandHandler("latest", lambda u, c: latest_command(u, c, res_db)))
