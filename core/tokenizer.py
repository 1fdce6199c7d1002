"""
File: core/tokenizer.py
Location: res_range_bot/core/tokenizer.py
Purpose: Split a spec string into clause tokens
"""

CLAUSE_SEPARATOR = ','


def tokenize(spec):
    """
    Split spec string on commas

    Args:
        spec: Raw spec string, e.g. "123, 130-135,^132"

    Returns:
        list: Trimmed, non-empty clause strings in input order

    Examples:
        tokenize("123") → ["123"]
        tokenize("  123  ,  ,  456  ") → ["123", "456"]
        tokenize("") → []
    """
    if not spec:
        return []

    return [part.strip() for part in spec.split(CLAUSE_SEPARATOR) if part.strip()]
