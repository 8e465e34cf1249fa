"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_validator import ProductValidator

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._validator = ProductValidator(product_repo)

    def handle(self, candidate: Product) -> int:
        """Add a new product to the catalog and return its id.

        The id carried by ``candidate`` is ignored; the store assigns
        one past the current maximum.
        """
        self._validator.check_new(candidate)

        product_id = self._product_repo.add(candidate)
        candidate.id = product_id
        logger.info("Added product #%s (%s)", product_id, candidate.code_value)
        return product_id
