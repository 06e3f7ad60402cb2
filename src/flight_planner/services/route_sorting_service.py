"""
Route Sorting Service - sorts route collections by a chosen comparator.
"""

import logging
from enum import Enum
from typing import List, Sequence, Union

from src.routing.comparators import comparator_name, get_comparator
from src.routing.sorting import stable_sort, unstable_sort

from src.flight_planner.exceptions import InvalidSortOptionError
from src.flight_planner.schemas.route import Route

logger = logging.getLogger(__name__)


class SortAlgorithm(str, Enum):
    STABLE = "stable"
    UNSTABLE = "unstable"

    @property
    def label(self) -> str:
        return "Merge Sort" if self is SortAlgorithm.STABLE else "Quick Sort"


class RouteSortingService:
    """Sorts routes with the stable (merge) or unstable (quick) sort."""

    def sort(
        self,
        routes: Sequence[Route],
        algorithm: Union[SortAlgorithm, str],
        comparator: int,
    ) -> List[Route]:
        """
        Return a sorted copy of ``routes``.

        Args:
            routes: Routes to sort; left untouched.
            algorithm: "stable" or "unstable".
            comparator: Selector 1-4 (price, duration, stopovers, combined).

        Raises:
            InvalidSortOptionError: For an unknown algorithm or selector.
        """
        try:
            selected = SortAlgorithm(algorithm)
        except ValueError:
            raise InvalidSortOptionError("sort algorithm", algorithm) from None

        compare = get_comparator(comparator)
        if compare is None:
            raise InvalidSortOptionError("comparator", comparator)

        logger.info(
            "Sorting %d routes using %s with %s comparator",
            len(routes),
            selected.label,
            comparator_name(comparator),
        )

        result = list(routes)
        if selected is SortAlgorithm.STABLE:
            stable_sort(result, compare)
        else:
            unstable_sort(result, compare)
        return result
