"""
Unit tests for catalog aggregation.
"""

import pytest
from catalog_report.models.product import Product
from catalog_report.stages.aggregation import (
    aggregate,
    count_by_category,
    filter_by_stock_and_price,
    top_n_by_price,
)


def product(name, price, category="Tech", in_stock=True):
    return Product(name=name, price=float(price), category=category, in_stock=in_stock)


@pytest.fixture
def catalog():
    return [
        product("A", 200, "Tech", True),
        product("B", 80, "Tech", True),
        product("C", 150, "Home", False),
        product("D", 500, "Home", True),
    ]


def names(products):
    return [p.name for p in products]


def test_filter_by_stock_and_price(catalog):
    """Test filtering keeps in-stock products above the threshold, in order."""
    result = filter_by_stock_and_price(catalog, 100)

    assert names(result) == ["A", "D"]


def test_filter_boundary_is_exclusive():
    """Test that a product priced exactly at min_price is excluded."""
    products = [product("Edge", 100), product("Above", 100.01)]

    assert names(filter_by_stock_and_price(products, 100)) == ["Above"]


def test_filter_predicate_matches_every_product(catalog):
    """Test inclusion iff in_stock and price > min_price."""
    for min_price in (-1, 0, 80, 150, 200, 500, 1000):
        kept = filter_by_stock_and_price(catalog, min_price)
        for p in catalog:
            assert (p in kept) == (p.in_stock and p.price > min_price)


def test_filter_negative_prices():
    """Test negative prices are kept only when above the threshold."""
    products = [product("Refund", -10), product("Free", 0)]

    assert names(filter_by_stock_and_price(products, -20)) == ["Refund", "Free"]
    assert filter_by_stock_and_price(products, 0) == []


def test_count_by_category(catalog):
    """Test counting per category in first-seen order."""
    counts = count_by_category(catalog)

    assert counts == {"Tech": 2, "Home": 2}
    assert list(counts) == ["Tech", "Home"]


def test_count_by_category_first_seen_order():
    """Test key order follows first appearance, not alphabetical order."""
    products = [product("1", 1, "Zoo"), product("2", 1, "Apple"), product("3", 1, "Zoo")]

    assert list(count_by_category(products).items()) == [("Zoo", 2), ("Apple", 1)]


def test_count_by_category_total_matches_input(catalog):
    """Test summed counts equal the input length, including empty input."""
    assert sum(count_by_category(catalog).values()) == len(catalog)
    assert count_by_category([]) == {}


def test_top_n_by_price(catalog):
    """Test top-N returns the most expensive products first."""
    assert names(top_n_by_price(catalog, 2)) == ["D", "A"]


def test_top_n_non_increasing(catalog):
    """Test top-N output is sorted non-increasing by price."""
    prices = [p.price for p in top_n_by_price(catalog, len(catalog))]

    assert prices == sorted(prices, reverse=True)


def test_top_n_bounds(catalog):
    """Test n <= 0 and n larger than the set."""
    assert top_n_by_price(catalog, 0) == []
    assert top_n_by_price(catalog, -3) == []
    assert names(top_n_by_price(catalog, len(catalog) + 5)) == ["D", "A", "C", "B"]


def test_top_n_stable_for_equal_prices():
    """Test equal prices keep their input order."""
    products = [
        product("first", 50),
        product("big", 90),
        product("second", 50),
        product("third", 50),
    ]

    assert names(top_n_by_price(products, 4)) == ["big", "first", "second", "third"]
    assert names(top_n_by_price(products, 2)) == ["big", "first"]


def test_top_n_does_not_mutate_input(catalog):
    """Test that ranking leaves the input order untouched."""
    before = list(catalog)
    top_n_by_price(catalog, 3)

    assert catalog == before


def test_aggregate_scope_all(catalog):
    """Test end-to-end scenario with counts and ranking over all products."""
    result = aggregate(catalog, min_price=100, n=2, scope="all")

    assert names(result.filtered) == ["A", "D"]
    assert result.category_counts == {"Tech": 2, "Home": 2}
    assert names(result.top_n) == ["D", "A"]
    assert result.reference_size == 4
    assert result.scope == "all"


def test_aggregate_scope_filtered(catalog):
    """Test counts and ranking restricted to the filtered subset."""
    result = aggregate(catalog, min_price=100, n=5, scope="filtered")

    assert names(result.filtered) == ["A", "D"]
    assert result.category_counts == {"Tech": 1, "Home": 1}
    assert names(result.top_n) == ["D", "A"]
    assert result.reference_size == 2


def test_aggregate_invalid_scope(catalog):
    """Test unknown scopes are refused."""
    with pytest.raises(ValueError):
        aggregate(catalog, scope="everything")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
