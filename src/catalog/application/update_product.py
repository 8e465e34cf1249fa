"""Application service: Update Product use case (full replace)."""

from __future__ import annotations

import logging

from catalog.domain.model.product import Product, ProductKey
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_validator import ProductValidator

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._validator = ProductValidator(product_repo)

    def handle(self, key: ProductKey, candidate: Product) -> Product:
        """Replace every field of an existing product.

        The product must already exist; an unknown key is an error,
        never an insert. The stored id is kept whatever ``candidate``
        carries.
        """
        product = self._validator.resolve_for_replace(key, candidate)

        product.replace_with(candidate)
        self._product_repo.update(product)
        logger.info("Replaced product #%s", product.id)
        return product
