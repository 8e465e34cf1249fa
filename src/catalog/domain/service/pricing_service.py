"""Domain service: Pricing.

Computes the price a consumer pays for a list of product ids. The same
id may appear several times; every occurrence is one unit of that
product. The whole request fails on the first product that cannot be
sold, nothing is skipped.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.domain.exceptions import EntityNotFoundError, NotPublishedError
from catalog.domain.model.allocation import StockAllocation
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

# (max entries, rate); requests above the last bound use DEFAULT_RATE.
SURCHARGE_TIERS: tuple[tuple[int, Decimal], ...] = (
    (10, Decimal("1.21")),
    (20, Decimal("1.17")),
)
DEFAULT_RATE = Decimal("1.15")


def surcharge_rate(entries: int) -> Decimal:
    """Rate applied to a request with ``entries`` line entries."""
    for limit, rate in SURCHARGE_TIERS:
        if entries <= limit:
            return rate
    return DEFAULT_RATE


class PricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def total_price(self, product_ids: list[int]) -> tuple[list[Product], float]:
        """Return the resolved products, in request order, and the total.

        Each occurrence adds the unit price once; the total is then
        multiplied by the tier rate for the number of entries and
        rounded to cents, half away from zero.
        """
        products: list[Product] = []
        allocations: dict[int, StockAllocation] = {}
        total = Money.zero()

        for product_id in product_ids:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("product not found")
            if not product.is_published:
                raise NotPublishedError(f"product not published id: {product.id}")

            allocation = allocations.setdefault(
                product.id, StockAllocation(product.id, product.quantity)
            )
            allocation.allocate_one()

            total = total + Money.of(product.price)
            products.append(product)

        total = (total * surcharge_rate(len(products))).rounded(2)
        return products, float(total)
