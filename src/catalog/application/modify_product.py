"""Application service: Modify Product use case (partial update)."""

from __future__ import annotations

import logging

from catalog.domain.model.product import Product, ProductKey, ProductPatch
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_validator import ProductValidator

logger = logging.getLogger(__name__)


class ModifyProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._validator = ProductValidator(product_repo)

    def handle(self, key: ProductKey, patch: ProductPatch) -> Product:
        """Apply the fields ``patch`` carries to an existing product.

        Every check runs before the merge so a rejected patch leaves
        the stored record untouched.
        """
        product = self._validator.resolve_for_patch(key, patch)

        product.merge(patch)
        self._product_repo.update(product)
        logger.info("Modified product #%s", product.id)
        return product
