"""Route-finding criteria, numbered as users select them (1-4)."""

from enum import IntEnum
from typing import Optional


class RouteCriterion(IntEnum):
    CHEAPEST = 1
    FASTEST = 2
    FEWEST_STOPOVERS = 3
    SLOWEST = 4

    @classmethod
    def parse(cls, value: object) -> Optional["RouteCriterion"]:
        """Criterion for an int or digit string, or None when unrecognised."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
