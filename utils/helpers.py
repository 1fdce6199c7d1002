"""
File: utils/helpers.py
Location: res_range_bot/utils/helpers.py
Purpose: Helper utility functions for incoming Telegram messages
"""

import re

MENTION_PATTERN = re.compile(r'@\w+')


def strip_mentions(text):
    """
    Remove @mentions from message text

    Examples:
        "@res_bot 123-128" → "123-128"
        "123, @res_bot ^125" → "123, ^125"
    """
    if not text:
        return ''
    return ' '.join(MENTION_PATTERN.sub('', text).split())


def mentions_bot(text, bot_username):
    """True if text mentions @bot_username (case-insensitive)"""
    if not text or not bot_username:
        return False
    return f"@{bot_username.lower()}" in text.lower()
