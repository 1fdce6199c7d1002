"""
File: utils/__init__.py
Location: res_range_bot/utils/__init__.py
Purpose: Utilities package initialization
"""

from .chunking import chunk_messages, pack_messages
from .formatting import format_res, oekaki_url, format_diagnostics
from .helpers import strip_mentions, mentions_bot

__all__ = [
    'chunk_messages',
    'pack_messages',
    'format_res',
    'oekaki_url',
    'format_diagnostics',
    'strip_mentions',
    'mentions_bot'
]
