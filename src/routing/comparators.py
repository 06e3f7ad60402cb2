"""
Three-way comparators over route summaries.

Each comparator returns a negative number, zero or a positive number,
and can be used on its own or chained. ``functools.cmp_to_key`` turns
any of them into a key for the built-in sort.
"""

from typing import Callable, Dict, Optional, Protocol


class RouteSummary(Protocol):
    """The aggregates the comparators look at."""

    @property
    def total_price(self) -> float: ...

    @property
    def total_duration(self) -> int: ...

    @property
    def stopovers(self) -> int: ...


RouteComparator = Callable[[RouteSummary, RouteSummary], int]

BY_PRICE = 1
BY_DURATION = 2
BY_STOPOVERS = 3
COMBINED = 4


def _three_way(a: float, b: float) -> int:
    return (a > b) - (a < b)


def compare_price(r1: RouteSummary, r2: RouteSummary) -> int:
    """Total price, ascending."""
    return _three_way(r1.total_price, r2.total_price)


def compare_duration(r1: RouteSummary, r2: RouteSummary) -> int:
    """Total duration, ascending."""
    return _three_way(r1.total_duration, r2.total_duration)


def compare_stopovers(r1: RouteSummary, r2: RouteSummary) -> int:
    """Stopover count, ascending."""
    return _three_way(r1.stopovers, r2.stopovers)


def chain(*comparators: RouteComparator) -> RouteComparator:
    """Lexicographic combination: the first non-zero result decides."""

    def compare(r1: RouteSummary, r2: RouteSummary) -> int:
        for comparator in comparators:
            result = comparator(r1, r2)
            if result != 0:
                return result
        return 0

    return compare


compare_combined: RouteComparator = chain(compare_price, compare_duration, compare_stopovers)
compare_combined.__doc__ = "Price, then duration, then stopovers."

_COMPARATORS: Dict[int, RouteComparator] = {
    BY_PRICE: compare_price,
    BY_DURATION: compare_duration,
    BY_STOPOVERS: compare_stopovers,
    COMBINED: compare_combined,
}

_COMPARATOR_NAMES: Dict[int, str] = {
    BY_PRICE: "Price",
    BY_DURATION: "Duration",
    BY_STOPOVERS: "Stopovers",
    COMBINED: "Combined (Price → Duration → Stopovers)",
}


def get_comparator(selector: int) -> Optional[RouteComparator]:
    """Comparator for selector 1-4, or None for anything else."""
    return _COMPARATORS.get(selector)


def comparator_name(selector: int) -> str:
    """Display name for a selector; "Unknown" when unrecognised."""
    return _COMPARATOR_NAMES.get(selector, "Unknown")
