"""
File: handlers/message_handlers.py
Location: res_range_bot/handlers/message_handlers.py
Purpose: Resolve a spec string, fetch the posts and send them back
"""

from telegram import Update
from telegram.constants import ChatType
from telegram.error import TelegramError
from telegram.ext import MessageHandler, filters, ContextTypes
from config import MESSAGE_CHUNK_LIMIT, MAX_REPLY_CHUNKS, MAX_RESOLVED_POSTS
from core import resolve_spec, restore_order, tokenize, TooManyIdentifiers, UpstreamUnavailable
from utils.chunking import pack_messages
from utils.formatting import format_res, oekaki_url, format_diagnostics
from utils.helpers import strip_mentions, mentions_bot
from .command_handlers import USAGE_TEXT
import logging

logger = logging.getLogger(__name__)

DB_ERROR_TEXT = "❌ Database error. Try again later."
EMPTY_RANGE_TEXT = "📭 No posts to show in that range."
NOT_FOUND_TEXT = "🔍 Those posts were not found."
TRUNCATED_TEXT = "...(truncated: too many posts, narrow the range)"
TOO_MANY_TEXT = "✂️ That range covers too many posts (limit {limit}). Narrow the range."

def _with_notes(text, notes):
    return f"{text}\n\n{notes}" if notes else text

async def reply_with_posts(message, spec_text, res_db):
    """
    Full request flow for one spec string

    Steps:
    1. Resolve spec (newest post number fetched only if needed)
    2. Fetch posts, put them back in resolved order
    3. Send text in chunks under MESSAGE_CHUNK_LIMIT
    4. Send each drawing as a separate photo
    5. Report skipped clauses

    A spec where no clause could be applied (every clause unparseable or an
    InvertedRange such as "125-121") gets the usage text plus the skipped
    clause notes, not the "no posts" reply. The "no posts" reply is kept for
    specs that were understood but select nothing ("121-,^121-").

    A spec that resolves to more than MAX_RESOLVED_POSTS numbers is refused
    before any number is expanded or fetched.
    """
    if not tokenize(spec_text):
        await message.reply_text(USAGE_TEXT)
        return

    try:
        resolution = resolve_spec(spec_text, res_db.get_max_post_number, MAX_RESOLVED_POSTS)
    except UpstreamUnavailable:
        await message.reply_text(DB_ERROR_TEXT)
        return
    except TooManyIdentifiers as e:
        logger.warning(f"⚠️ Refused {spec_text!r}: {e}")
        await message.reply_text(TOO_MANY_TEXT.format(limit=e.limit))
        return

    notes = format_diagnostics(resolution.diagnostics)

    if not resolution.clauses:
        await message.reply_text(_with_notes(USAGE_TEXT, notes))
        return

    numbers = resolution.identifiers
    if not numbers:
        await message.reply_text(_with_notes(EMPTY_RANGE_TEXT, notes))
        return

    try:
        posts = res_db.get_res_by_numbers(numbers)
    except Exception as e:
        logger.error(f"❌ Database error for {spec_text!r}: {e}")
        await message.reply_text(DB_ERROR_TEXT)
        return

    if not posts:
        await message.reply_text(_with_notes(NOT_FOUND_TEXT, notes))
        return

    posts = restore_order(posts, numbers)
    packed = pack_messages([format_res(post) for post in posts], MESSAGE_CHUNK_LIMIT)

    truncated = len(packed) > MAX_REPLY_CHUNKS
    if truncated:
        packed = packed[:MAX_REPLY_CHUNKS]
        # drawings only for posts sent in full
        posts = posts[:packed[-1][1]]

    for chunk, _ in packed:
        await message.reply_text(chunk)

    if truncated:
        await message.reply_text(TRUNCATED_TEXT)

    for post in posts:
        url = oekaki_url(post.get('oekaki_id'))
        if not url:
            continue
        try:
            await message.reply_photo(photo=url, caption=f"#{post['no']}")
        except TelegramError as e:
            logger.error(f"❌ Could not send oekaki for #{post['no']} ({url}): {e}")

    if notes:
        await message.reply_text(notes)

    logger.info(f"✅ Sent {len(posts)} posts for {spec_text!r} in {len(packed)} messages")

async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE, res_db):
    """
    Plain text handler
    Private chats: every message is a spec string
    Groups: only messages that mention the bot
    """
    message = update.effective_message
    if not message or not message.text:
        return

    if update.effective_user and update.effective_user.is_bot:
        return

    text = message.text
    chat = update.effective_chat
    if chat and chat.type != ChatType.PRIVATE and not mentions_bot(text, context.bot.username):
        return

    await reply_with_posts(message, strip_mentions(text), res_db)

def register_message_handlers(app, res_db):
    """Register message handler"""
    app.add_handler(MessageHandler(
        filters.TEXT & ~filters.COMMAND,
        lambda u, c: handle_message(u, c, res_db)
    ))
