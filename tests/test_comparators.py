"""Tests for route comparators and their selectors."""

import pytest

from src.routing.comparators import (
    BY_DURATION,
    BY_PRICE,
    BY_STOPOVERS,
    COMBINED,
    chain,
    comparator_name,
    compare_combined,
    compare_duration,
    compare_price,
    compare_stopovers,
    get_comparator,
)


@pytest.fixture
def cheap_slow(make_route):
    return make_route(1, 100.0, 600, 2)


@pytest.fixture
def pricey_fast(make_route):
    return make_route(2, 500.0, 120, 0)


class TestSingleKey:
    def test_price(self, cheap_slow, pricey_fast):
        assert compare_price(cheap_slow, pricey_fast) < 0
        assert compare_price(pricey_fast, cheap_slow) > 0
        assert compare_price(cheap_slow, cheap_slow) == 0

    def test_duration(self, cheap_slow, pricey_fast):
        assert compare_duration(pricey_fast, cheap_slow) < 0
        assert compare_duration(cheap_slow, pricey_fast) > 0

    def test_stopovers(self, cheap_slow, pricey_fast):
        assert compare_stopovers(pricey_fast, cheap_slow) < 0
        assert compare_stopovers(cheap_slow, cheap_slow) == 0


class TestCombined:
    def test_price_decides_first(self, cheap_slow, pricey_fast):
        assert compare_combined(cheap_slow, pricey_fast) < 0

    def test_duration_breaks_price_tie(self, make_route):
        assert compare_combined(make_route(1, 100.0, 200, 0), make_route(2, 100.0, 100, 3)) > 0

    def test_stopovers_break_remaining_tie(self, make_route):
        assert compare_combined(make_route(1, 100.0, 200, 0), make_route(2, 100.0, 200, 1)) < 0

    def test_full_tie_is_zero(self, make_route):
        assert compare_combined(make_route(1, 100.0, 200, 1), make_route(2, 100.0, 200, 1)) == 0

    def test_chain_of_nothing_is_always_equal(self, cheap_slow, pricey_fast):
        assert chain()(cheap_slow, pricey_fast) == 0


class TestSelectors:
    @pytest.mark.parametrize(
        "selector, comparator",
        [
            (BY_PRICE, compare_price),
            (BY_DURATION, compare_duration),
            (BY_STOPOVERS, compare_stopovers),
            (COMBINED, compare_combined),
        ],
    )
    def test_get_comparator(self, selector, comparator):
        assert get_comparator(selector) is comparator

    @pytest.mark.parametrize("selector", [0, 5, -1, 99])
    def test_invalid_selector(self, selector):
        assert get_comparator(selector) is None
        assert comparator_name(selector) == "Unknown"

    def test_names(self):
        assert comparator_name(BY_PRICE) == "Price"
        assert comparator_name(BY_DURATION) == "Duration"
        assert comparator_name(BY_STOPOVERS) == "Stopovers"
        assert comparator_name(COMBINED).startswith("Combined")
