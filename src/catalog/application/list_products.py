"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.mapping import to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [to_dto(p) for p in self._product_repo.list_all()]

    def search_by_price_gt(self, price: float) -> list[ProductDTO]:
        """Products strictly more expensive than ``price``.

        An empty result is reported as an error, not an empty list.
        """
        products = self._product_repo.search_by_price_gt(price)
        if not products:
            raise EntityNotFoundError(
                f"not found products with price greater than {price:.2f}"
            )
        return [to_dto(p) for p in products]
