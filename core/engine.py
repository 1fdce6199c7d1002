"""
File: core/engine.py
Location: res_range_bot/core/engine.py
Purpose: Entry points of the post-range engine (spec string → post numbers)
"""

import logging

from .clause_parser import parse_clauses
from .errors import UpstreamUnavailable
from .set_resolver import resolve_clauses
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def parse_spec(spec):
    """
    Tokenize and parse a spec string

    Returns:
        tuple: (list of Clause, list of Diagnostic)
    """
    return parse_clauses(tokenize(spec))


def resolve(spec, max_identifier, max_results=None):
    """
    Resolve a spec string against a known newest post number

    Pure: the same (spec, max_identifier) always gives the same result.

    Args:
        spec: Spec string, e.g. "123-128,^126" or "?320-330,?^325"
        max_identifier: Newest post number (non-negative)
        max_results: Optional cap on the number of identifiers

    Returns:
        Resolution: identifiers in first-insertion order + diagnostics

    Examples:
        resolve("123-128,^126", 1000).identifiers → [123, 124, 125, 127, 128]
        resolve("?456", 2345).identifiers → [1456]
    """
    clauses, diagnostics = parse_spec(spec)
    return resolve_clauses(clauses, max_identifier, diagnostics, max_results)


def resolve_spec(spec, fetch_max_identifier, max_results=None):
    """
    Resolve a spec string, asking the host for the newest post number

    fetch_max_identifier is called at most once, and only when a clause
    needs it (open range or relative reference). Its result is not cached.

    Raises:
        UpstreamUnavailable: fetch_max_identifier failed while needed
        TooManyIdentifiers: more than max_results identifiers
    """
    clauses, diagnostics = parse_spec(spec)

    max_identifier = 0
    if any(clause.needs_max for clause in clauses):
        try:
            max_identifier = fetch_max_identifier()
        except Exception as e:
            logger.error(f"Could not fetch newest post number: {e}")
            raise UpstreamUnavailable("newest post number unavailable") from e

        if max_identifier is None:
            max_identifier = 0

    return resolve_clauses(clauses, max_identifier, diagnostics, max_results)
