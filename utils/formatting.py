"""
File: utils/formatting.py
Location: res_range_bot/utils/formatting.py
Purpose: Render res records and diagnostics as reply text
"""

from config import OEKAKI_URL_PREFIX, OEKAKI_EXTENSION, format_time_display


def format_res(res):
    """
    Format one post for a reply

    Args:
        res: Post dict from ResDB

    Returns:
        str: Heading line + body

    Example:
        123 名無しさん 2024/01/01(月) 12:00:00 ID: abcd1234
        body text...
    """
    datetime_text = res.get('datetime_text') or format_time_display(res.get('datetime'))
    heading = f"{res['no']} {res.get('name_and_trip', '')} {datetime_text} ID: {res.get('id', '')}"
    return f"{heading}\n{res.get('main_text', '')}\n"


def oekaki_url(oekaki_id, prefix=None):
    """
    Build the image URL for a drawing

    Returns:
        str or None: prefix + id + extension, None if no drawing or no prefix
    """
    prefix = OEKAKI_URL_PREFIX if prefix is None else prefix
    if oekaki_id is None or not prefix:
        return None
    return f"{prefix}{oekaki_id}{OEKAKI_EXTENSION}"


def format_diagnostics(diagnostics):
    """Short list of skipped clauses (informational ones are left out)"""
    errors = [d for d in diagnostics if d.is_error]
    if not errors:
        return ''

    lines = ["⚠️ Skipped:"]
    lines.extend(f"• {d.clause} ({d.kind}: {d.message})" for d in errors)
    return '\n'.join(lines)
