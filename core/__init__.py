"""
File: core/__init__.py
Location: res_range_bot/core/__init__.py
Purpose: Post-range engine package initialization
"""

from .engine import parse_spec, resolve, resolve_spec
from .errors import (
    Diagnostic,
    ClauseError,
    PostRangeError,
    UpstreamUnavailable,
    TooManyIdentifiers,
    MALFORMED_RANGE,
    INVERTED_RANGE,
    UNRECOGNIZED_CLAUSE,
    RELATIVE_DIGIT_OVERFLOW
)
from .query_ranges import QueryPlan, compact, restore_order
from .relative import resolve_relative
from .set_resolver import Resolution
from .tokenizer import tokenize

__all__ = [
    'parse_spec', 'resolve', 'resolve_spec',
    'Diagnostic', 'ClauseError', 'PostRangeError', 'UpstreamUnavailable', 'TooManyIdentifiers',
    'MALFORMED_RANGE', 'INVERTED_RANGE', 'UNRECOGNIZED_CLAUSE', 'RELATIVE_DIGIT_OVERFLOW',
    'QueryPlan', 'compact', 'restore_order',
    'resolve_relative', 'Resolution', 'tokenize'
]
