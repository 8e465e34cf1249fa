"""StockAllocation: counts units of one product claimed by a price request.

A request may list the same product id several times. Each occurrence
claims one more unit, and a product can never hand out more units than
it has in stock. Allocations live only for the duration of one request;
the stored quantity is not decremented.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import UnavailableQuantityError


@dataclass
class StockAllocation:
    """Invariant: ``allocated`` never exceeds ``quantity``."""

    product_id: int
    quantity: int
    allocated: int = 0

    def allocate_one(self) -> None:
        """Claim one unit, raising UnavailableQuantityError when none is left."""
        if self.allocated >= self.quantity:
            raise UnavailableQuantityError(
                f"unavailable quantity for product id: {self.product_id}"
            )
        self.allocated += 1
