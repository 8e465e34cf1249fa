"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    quantity: int
    code_value: str
    is_published: bool
    expiration: str
    price: float


@dataclass(frozen=True)
class PriceQuoteDTO:
    """Output: the products of a price request and what they cost."""

    products: list[ProductDTO]
    total_price: float
