"""
File: core/query_ranges.py
Location: res_range_bot/core/query_ranges.py
Purpose: Compact resolved post numbers into range/singleton lookups for storage
"""

from dataclasses import dataclass, field


@dataclass
class QueryPlan:
    """
    Storage lookups for a set of post numbers

    ranges: inclusive (lo, hi) runs with lo < hi
    singles: isolated numbers
    """

    ranges: list = field(default_factory=list)
    singles: list = field(default_factory=list)

    @property
    def lookup_count(self):
        return len(self.ranges) + (1 if self.singles else 0)

    def is_empty(self):
        return not self.ranges and not self.singles

    def expand(self):
        """All numbers covered by the plan, ascending"""
        numbers = set(self.singles)
        for lo, hi in self.ranges:
            numbers.update(range(lo, hi + 1))
        return sorted(numbers)


def compact(identifiers):
    """
    Merge contiguous post numbers into runs

    Works on a sorted copy; the caller's order is left alone.

    Examples:
        compact([5, 1, 2, 3, 9]) → ranges [(1, 3)], singles [5, 9]
        compact([]) → empty plan
    """
    plan = QueryPlan()
    run_start = run_end = None

    for number in sorted(set(identifiers)):
        if run_end is not None and number == run_end + 1:
            run_end = number
            continue
        if run_start is not None:
            _close_run(plan, run_start, run_end)
        run_start = run_end = number

    if run_start is not None:
        _close_run(plan, run_start, run_end)

    return plan


def _close_run(plan, lo, hi):
    if lo == hi:
        plan.singles.append(lo)
    else:
        plan.ranges.append((lo, hi))


def restore_order(records, identifiers, key='no'):
    """
    Put storage records back into resolved order

    Args:
        records: Rows from storage (dicts), any order
        identifiers: Resolved post numbers in display order
        key: Record field holding the post number

    Returns:
        list: Records in identifiers order; numbers with no record are skipped
    """
    by_number = {record[key]: record for record in records}
    return [by_number[number] for number in identifiers if number in by_number]
