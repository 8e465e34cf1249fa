"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.json_product_store import JsonProductStore


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or Settings()
    return ProductRepository(JsonProductStore(settings.products_file))
