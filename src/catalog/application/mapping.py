"""Domain to DTO mapping shared by the query handlers."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.model.product import Product


def to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        quantity=product.quantity,
        code_value=product.code_value,
        is_published=product.is_published,
        expiration=product.expiration,
        price=product.price,
    )
