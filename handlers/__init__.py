"""
File: handlers/__init__.py
Location: res_range_bot/handlers/__init__.py
Purpose: Handlers package initialization
"""

from .command_handlers import register_command_handlers
from .message_handlers import register_message_handlers, reply_with_posts

def register_all_handlers(app, res_db):
    """
    Register all bot handlers

    Args:
        app: Telegram Application instance
        res_db: ResDB instance
    """
    register_command_handlers(app, res_db)
    register_message_handlers(app, res_db)

__all__ = [
    'register_all_handlers',
    'register_command_handlers',
    'register_message_handlers',
    'reply_with_posts'
]
