"""
File: config/timezone_config.py
Purpose: Timezone conversion for post timestamps (UTC storage → display zone)
"""

import pytz

from .settings import DISPLAY_TIMEZONE

# Timezone Configuration
DISPLAY_TZ = pytz.timezone(DISPLAY_TIMEZONE)
UTC = pytz.UTC


def utc_to_display(utc_dt):
    """
    Convert UTC datetime to display-zone naive datetime

    Args:
        utc_dt: datetime object in UTC (naive or aware)

    Returns:
        datetime: naive datetime in DISPLAY_TIMEZONE
    """
    utc_aware = UTC.localize(utc_dt) if utc_dt.tzinfo is None else utc_dt
    local_aware = utc_aware.astimezone(DISPLAY_TZ)
    return local_aware.replace(tzinfo=None)


def format_time_display(utc_dt):
    """
    Format a post timestamp for display

    Used when a post has no textual timestamp of its own.

    Examples (Asia/Tokyo):
        2024-01-01 03:00 UTC → "2024/01/01 12:00:00"
    """
    if utc_dt is None:
        return ''
    return utc_to_display(utc_dt).strftime('%Y/%m/%d %H:%M:%S')
