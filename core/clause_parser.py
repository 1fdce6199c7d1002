"""
File: core/clause_parser.py
Location: res_range_bot/core/clause_parser.py
Purpose: Classify clause tokens into single / closed range / open range
"""

import re
from dataclasses import dataclass
from typing import Optional

from .errors import ClauseError, MALFORMED_RANGE, UNRECOGNIZED_CLAUSE

EXCLUDE_MARKER = '^'
RELATIVE_MARKER = '?'
RANGE_SEPARATOR = '-'

# Clause kinds
SINGLE = 'single'
CLOSED = 'closed'
OPEN = 'open'

_DIGITS = re.compile(r'[0-9]+')


@dataclass(frozen=True)
class Endpoint:
    """One end of a clause: digits as typed, plus the relative flag"""

    digits: str
    relative: bool = False

    @property
    def value(self):
        return int(self.digits)


@dataclass(frozen=True)
class Clause:
    """
    Parsed clause

    Flat variant: kind is SINGLE, CLOSED or OPEN, crossed with the
    exclusion flag. `hi` is only set for CLOSED clauses.
    """

    text: str
    kind: str
    lo: Endpoint
    hi: Optional[Endpoint] = None
    excluded: bool = False

    @property
    def relative(self):
        return self.lo.relative or (self.hi is not None and self.hi.relative)

    @property
    def needs_max(self):
        """True when resolution depends on the newest post number"""
        return self.kind == OPEN or self.relative


def _strip_markers(token):
    """
    Peel the ^ and ? prefixes off a token (either order, once each)

    Returns:
        tuple: (excluded, relative, remainder)
    """
    excluded = False
    relative = False
    rest = token

    while rest[:1] in (EXCLUDE_MARKER, RELATIVE_MARKER):
        marker = rest[0]
        if marker == EXCLUDE_MARKER:
            if excluded:
                raise ClauseError(UNRECOGNIZED_CLAUSE, token, "exclusion marker repeated")
            excluded = True
        else:
            if relative:
                raise ClauseError(UNRECOGNIZED_CLAUSE, token, "relative marker repeated")
            relative = True
        rest = rest[1:].lstrip()

    return excluded, relative, rest


def _parse_endpoint(text, relative, token, error_kind):
    """Parse one endpoint; an endpoint may carry its own ? marker"""
    text = text.strip()

    if text.startswith(RELATIVE_MARKER):
        relative = True
        text = text[1:].strip()

    if not _DIGITS.fullmatch(text):
        if error_kind == MALFORMED_RANGE:
            message = f"range bounds must be numbers, got {text!r}" if text else "missing range bound"
        else:
            message = "not a number, range or exclusion"
        raise ClauseError(error_kind, token, message)

    return Endpoint(digits=text, relative=relative)


def parse_clause(token):
    """
    Parse one clause token

    Args:
        token: Trimmed clause text from tokenize()

    Returns:
        Clause

    Raises:
        ClauseError: MalformedRange or UnrecognizedClause

    Supports:
        - "123"       single
        - "123-128"   closed range
        - "123-"      open range (up to the newest post)
        - "^126"      exclusion (any of the above)
        - "?324"      relative reference (any of the above)
        - "?^325", "^?325-330"  both markers, either order
        - "123000-?50"  relative upper bound only
    """
    excluded, relative, rest = _strip_markers(token)

    if not rest:
        raise ClauseError(UNRECOGNIZED_CLAUSE, token, "marker without a number")

    if RANGE_SEPARATOR not in rest:
        lo = _parse_endpoint(rest, relative, token, UNRECOGNIZED_CLAUSE)
        return Clause(text=token, kind=SINGLE, lo=lo, excluded=excluded)

    lo_text, hi_text = rest.split(RANGE_SEPARATOR, 1)
    lo = _parse_endpoint(lo_text, relative, token, MALFORMED_RANGE)

    if not hi_text.strip():
        return Clause(text=token, kind=OPEN, lo=lo, excluded=excluded)

    hi = _parse_endpoint(hi_text, relative, token, MALFORMED_RANGE)
    return Clause(text=token, kind=CLOSED, lo=lo, hi=hi, excluded=excluded)


def parse_clauses(tokens):
    """
    Parse every token, skipping the ones that fail

    Returns:
        tuple: (list of Clause, list of Diagnostic)
    """
    clauses = []
    diagnostics = []

    for token in tokens:
        try:
            clauses.append(parse_clause(token))
        except ClauseError as e:
            diagnostics.append(e.to_diagnostic())

    return clauses, diagnostics
