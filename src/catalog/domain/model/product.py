"""Product aggregate.

A product is addressed either by its numeric id, assigned by the store,
or by its code value, a unique text identifier chosen by the user.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from catalog.domain.exceptions import (
    PriceOutOfRangeError,
    QuantityOutOfRangeError,
    ValidationError,
)

# An int addresses a product by id, a str by code value.
ProductKey = int | str


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root, the entry point for any operation
    involving a product. Kept as a mutable dataclass
    because partial updates merge into the loaded record.
    """

    id: int
    name: str
    quantity: int
    code_value: str
    expiration: str
    price: float
    is_published: bool = False

    def check_required_fields(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not self.code_value or not self.code_value.strip():
            raise ValidationError("Product code_value is required")

    def check_stock_bounds(self) -> None:
        """Strict bounds that every newly stored record must satisfy."""
        if not math.isfinite(self.price) or self.price <= 0:
            raise PriceOutOfRangeError("price must be greater than 0")
        if self.quantity <= 0:
            raise QuantityOutOfRangeError("quantity must be greater than 0")

    def replace_with(self, candidate: Product) -> None:
        """Overwrite every field but the id."""
        self.name = candidate.name
        self.quantity = candidate.quantity
        self.code_value = candidate.code_value
        self.expiration = candidate.expiration
        self.price = candidate.price
        self.is_published = candidate.is_published

    def merge(self, patch: ProductPatch) -> None:
        """Copy only the fields the patch carries.

        Empty strings and zero numbers mean "unchanged";
        ``is_published`` is only left alone when it is ``None``.
        """
        if patch.name:
            self.name = patch.name
        if patch.code_value:
            self.code_value = patch.code_value
        if patch.expiration:
            self.expiration = patch.expiration
        if patch.quantity:
            self.quantity = patch.quantity
        if patch.price:
            self.price = patch.price
        if patch.is_published is not None:
            self.is_published = patch.is_published


@dataclass(frozen=True)
class ProductPatch:
    """Input of a partial update."""

    name: str = ""
    quantity: int = 0
    code_value: str = ""
    expiration: str = ""
    price: float = 0.0
    is_published: bool | None = None

    def check_non_negative(self) -> None:
        if self.quantity < 0:
            raise QuantityOutOfRangeError("quantity must not be negative")
        if not math.isfinite(self.price):
            raise PriceOutOfRangeError("price must be a finite number")
        if self.price < 0:
            raise PriceOutOfRangeError("price must not be negative")
