"""
File: core/set_resolver.py
Location: res_range_bot/core/set_resolver.py
Purpose: Turn parsed clauses into the final ordered list of post numbers
"""

import logging
from dataclasses import dataclass, field

from .clause_parser import SINGLE, OPEN
from .errors import ClauseError, Diagnostic, TooManyIdentifiers, INVERTED_RANGE, RELATIVE_DIGIT_OVERFLOW
from .relative import is_digit_overflow, resolve_relative

logger = logging.getLogger(__name__)


def _merge(intervals):
    merged = []
    for lo, hi in sorted(intervals):
        if merged and lo <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
        else:
            merged.append((lo, hi))
    return merged


def _subtract(lo, hi, merged):
    """Parts of lo..=hi not covered by merged (sorted, disjoint) intervals"""
    pieces = []
    start = lo

    for a, b in merged:
        if a > hi:
            break
        if b < start:
            continue
        if a > start:
            pieces.append((start, a - 1))
        start = b + 1
        if start > hi:
            break

    if start <= hi:
        pieces.append((start, hi))
    return pieces


class ResolvedSet:
    """
    Included / excluded accumulator

    Features:
    - Both sides are stored as intervals, so "1-100000000" costs nothing
      until identifiers() is called
    - Included numbers keep first-insertion order
    - Difference is applied once, in runs()
    """

    def __init__(self):
        self.included = []
        self.excluded = []

    def include(self, lo, hi):
        if lo <= hi:
            self.included.append((lo, hi))

    def exclude(self, lo, hi):
        if lo <= hi:
            self.excluded.append((lo, hi))

    def _merged_exclusions(self):
        return _merge(self.excluded)

    def runs(self):
        """
        Surviving numbers as (lo, hi) runs, in first-insertion order

        Each run holds numbers not seen in an earlier inclusion and
        not excluded anywhere in the spec.
        """
        exclusions = self._merged_exclusions()
        seen = []
        runs = []

        for lo, hi in self.included:
            for new_lo, new_hi in _subtract(lo, hi, seen):
                runs.extend(_subtract(new_lo, new_hi, exclusions))
            seen = _merge(seen + [(lo, hi)])

        return runs

    def count(self):
        """Number of identifiers, without expanding them"""
        return sum(hi - lo + 1 for lo, hi in self.runs())

    def identifiers(self):
        """Included numbers minus excluded ones, first-insertion order"""
        return [number for lo, hi in self.runs() for number in range(lo, hi + 1)]


@dataclass
class Resolution:
    """Result of one resolution call"""

    identifiers: list
    diagnostics: list = field(default_factory=list)
    clauses: list = field(default_factory=list)

    @property
    def errors(self):
        """Diagnostics for clauses that were skipped"""
        return [d for d in self.diagnostics if d.is_error]


def _resolve_endpoint(endpoint, clause, max_identifier, diagnostics):
    if not endpoint.relative:
        return endpoint.value

    if is_digit_overflow(endpoint.digits, max_identifier):
        diagnostics.append(Diagnostic(
            clause=clause.text,
            kind=RELATIVE_DIGIT_OVERFLOW,
            message=f"?{endpoint.digits} has as many digits as the newest post ({max_identifier}), read as absolute"
        ))

    return resolve_relative(endpoint.digits, max_identifier)


def resolve_bounds(clause, max_identifier, diagnostics):
    """
    Resolve a clause to an inclusive (lo, hi) interval

    Returns:
        tuple: (lo, hi); lo > hi means an empty open range

    Raises:
        ClauseError: InvertedRange for a closed range with lo > hi
    """
    lo = _resolve_endpoint(clause.lo, clause, max_identifier, diagnostics)

    if clause.kind == SINGLE:
        return lo, lo

    if clause.kind == OPEN:
        return lo, max_identifier

    hi = _resolve_endpoint(clause.hi, clause, max_identifier, diagnostics)
    if lo > hi:
        raise ClauseError(INVERTED_RANGE, clause.text, f"start {lo} is after end {hi}")
    return lo, hi


def resolve_clauses(clauses, max_identifier, diagnostics=None, max_results=None):
    """
    Apply clauses left to right

    Args:
        clauses: Parsed clauses
        max_identifier: Newest post number (bounds open ranges, anchors ?refs)
        diagnostics: Parse diagnostics to carry into the result
        max_results: Refuse to expand more identifiers than this (None = no cap)

    Returns:
        Resolution

    Raises:
        TooManyIdentifiers: the result would exceed max_results; checked on
            the interval form, before anything is expanded
    """
    if max_identifier < 0:
        raise ValueError(f"max_identifier must be non-negative, got {max_identifier}")

    diagnostics = list(diagnostics or [])
    applied = []
    resolved = ResolvedSet()

    for clause in clauses:
        try:
            lo, hi = resolve_bounds(clause, max_identifier, diagnostics)
        except ClauseError as e:
            logger.debug(f"Skipping clause {clause.text!r}: {e}")
            diagnostics.append(e.to_diagnostic())
            continue

        if clause.kind == OPEN and lo > hi:
            logger.debug(f"Open range {clause.text!r} starts after newest post {max_identifier}")

        if clause.excluded:
            logger.debug(f"Excluding {lo}..={hi} ({clause.text!r})")
            resolved.exclude(lo, hi)
        else:
            logger.debug(f"Including {lo}..={hi} ({clause.text!r})")
            resolved.include(lo, hi)
        applied.append(clause)

    if max_results is not None:
        count = resolved.count()
        if count > max_results:
            raise TooManyIdentifiers(count, max_results)

    return Resolution(
        identifiers=resolved.identifiers(),
        diagnostics=diagnostics,
        clauses=applied
    )
