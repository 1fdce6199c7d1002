"""
File: core/relative.py
Location: res_range_bot/core/relative.py
Purpose: Resolve relative references ("?324") against the newest post number
"""


def digit_count(number):
    """Number of decimal digits (digit_count(0) == 1)"""
    return len(str(abs(number)))


def is_digit_overflow(token, max_identifier):
    """
    True when a relative token is too long to be relative

    A token with at least as many digits as the max is read as an
    absolute number instead.
    """
    return len(token) >= digit_count(max_identifier)


def resolve_relative(token, max_identifier):
    """
    Replace the low-order digits of max_identifier with token

    Args:
        token: Digit string as typed by the user (leading zeros count)
        max_identifier: Newest known post number

    Returns:
        int: Absolute post number, never negative

    Wraparound:
        If the substituted number is newer than max_identifier, the
        previous block of 10^len(token) is used instead.

    Examples (max 123340):
        "324" → 123324
        "24"  → 123324
        "07"  → 123307
    Examples (max 2345):
        "456" → 1456  (2456 does not exist yet)
        "345" → 2345
        "5000" → 5000 (as many digits as max: absolute)
    """
    value = int(token)

    if is_digit_overflow(token, max_identifier):
        return value

    modulus = 10 ** len(token)
    base = max_identifier - max_identifier % modulus
    candidate = base + value

    if candidate > max_identifier:
        previous_base = base - modulus
        candidate = previous_base + value if previous_base >= 0 else value

    return candidate
