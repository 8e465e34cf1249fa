"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import ProductKey
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, key: ProductKey) -> None:
        product = self._product_repo.find(key)
        if product is None:
            raise EntityNotFoundError("product not found")

        self._product_repo.delete(product.id)
        logger.info("Deleted product #%s (%s)", product.id, product.code_value)
