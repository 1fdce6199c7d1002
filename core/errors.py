"""
File: core/errors.py
Location: res_range_bot/core/errors.py
Purpose: Error taxonomy and diagnostics for post-range resolution
"""

from dataclasses import dataclass

# Diagnostic kinds
MALFORMED_RANGE = 'MalformedRange'
INVERTED_RANGE = 'InvertedRange'
UNRECOGNIZED_CLAUSE = 'UnrecognizedClause'
RELATIVE_DIGIT_OVERFLOW = 'RelativeDigitOverflow'

# Kinds that are reported but do not drop the clause
INFORMATIONAL_KINDS = frozenset({RELATIVE_DIGIT_OVERFLOW})


class PostRangeError(Exception):
    """Base class for every post-range engine error"""


class ClauseError(PostRangeError):
    """
    A single clause could not be parsed or resolved

    Raised by the clause parser and set resolver, caught by the engine
    and turned into a Diagnostic. Never escapes resolve().
    """

    def __init__(self, kind, clause, message):
        super().__init__(f"{kind}: {clause!r} ({message})")
        self.kind = kind
        self.clause = clause
        self.message = message

    def to_diagnostic(self):
        return Diagnostic(clause=self.clause, kind=self.kind, message=self.message)


class UpstreamUnavailable(PostRangeError):
    """
    The maximum post number could not be fetched

    Raised only when at least one clause needs the maximum (open range or
    relative reference). The original exception is chained as __cause__.
    """


class TooManyIdentifiers(PostRangeError):
    """The spec resolves to more post numbers than the caller allows"""

    def __init__(self, count, limit):
        super().__init__(f"spec resolves to {count} posts, limit is {limit}")
        self.count = count
        self.limit = limit


@dataclass(frozen=True)
class Diagnostic:
    """One problem found in a spec string"""

    clause: str
    kind: str
    message: str

    @property
    def is_error(self):
        """False for informational kinds (the clause was still applied)"""
        return self.kind not in INFORMATIONAL_KINDS

    def __str__(self):
        return f"{self.clause}: {self.message}"
