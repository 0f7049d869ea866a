"""
Catalog Aggregation.

Computes the three catalog views over validated products:
in-stock-above-price filter, per-category counts, and top-N by price.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence

from catalog_report.models.product import Product
import config.settings as settings

logger = logging.getLogger(__name__)


def filter_by_stock_and_price(products: Sequence[Product], min_price: float) -> List[Product]:
    """
    Keep in-stock products priced strictly above min_price, in input order.

    Args:
        products: Validated products
        min_price: Exclusive lower bound on price

    Returns:
        Filtered products
    """
    return [p for p in products if p.in_stock and p.price > min_price]


def count_by_category(products: Sequence[Product]) -> Dict[str, int]:
    """
    Count products per category.

    Keys follow the order in which each category is first seen.
    """
    return dict(Counter(p.category for p in products))


def top_n_by_price(products: Sequence[Product], n: int) -> List[Product]:
    """
    Return the n most expensive products, highest price first.

    Equal prices keep their input order. n <= 0 gives an empty list.
    """
    if n <= 0:
        return []
    # sorted() stays stable with reverse=True
    return sorted(products, key=lambda p: p.price, reverse=True)[:n]


@dataclass
class AggregateResult:
    """
    The three views computed for one run.
    """
    filtered: List[Product]
    category_counts: Dict[str, int]
    top_n: List[Product]
    min_price: float
    n: int
    scope: str = "all"  # Reference set used for category_counts and top_n
    reference_size: int = 0


def aggregate(
    products: Sequence[Product],
    min_price: float = settings.DEFAULT_MIN_PRICE,
    n: int = settings.DEFAULT_TOP_N,
    scope: str = settings.AGGREGATION_SCOPE
) -> AggregateResult:
    """
    Compute all three views over one reference set.

    Args:
        products: All validated products, in input order
        min_price: Threshold for the in-stock filter
        n: Size of the top-N view
        scope: "all" counts and ranks every product, "filtered" only the
            filtered subset

    Returns:
        AggregateResult

    Raises:
        ValueError: If scope is unknown
    """
    if scope not in settings.AGGREGATION_SCOPES:
        raise ValueError(
            f"Invalid scope: {scope}. Must be one of {settings.AGGREGATION_SCOPES}"
        )

    filtered = filter_by_stock_and_price(products, min_price)
    reference = list(products) if scope == "all" else filtered

    result = AggregateResult(
        filtered=filtered,
        category_counts=count_by_category(reference),
        top_n=top_n_by_price(reference, n),
        min_price=min_price,
        n=n,
        scope=scope,
        reference_size=len(reference)
    )

    logger.info(
        f"Aggregated {len(products)} products (scope={scope}): "
        f"{len(result.filtered)} filtered, "
        f"{len(result.category_counts)} categories, "
        f"top {len(result.top_n)}"
    )

    return result


# Design Rationale and Trade-offs:
#
# 1. Why Counter for category counts?
#    - dict subclass, so keys keep first-seen order
#    - Trade-off: Converted to a plain dict for export
#
# 2. Why sorted(..., reverse=True) for top-N?
#    - Python's sort stays stable when reversed, so equal prices keep input order
#    - Trade-off: Sorts the whole reference set even for small n
#
# 3. Why one scope per call to aggregate()?
#    - Category counts and top-N always describe the same reference set
#    - Trade-off: Mixed views need two aggregate() calls
