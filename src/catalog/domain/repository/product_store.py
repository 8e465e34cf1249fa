"""Abstract store for the product collection.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductStore(ABC):

    @abstractmethod
    def get_all(self) -> list[Product]:
        """Return every product in stored order."""

    @abstractmethod
    def get_one(self, product_id: int) -> Product:
        """Return a product by id or raise EntityNotFoundError."""

    @abstractmethod
    def add_one(self, product: Product) -> int:
        """Assign the next id to ``product``, persist it and return the id."""

    @abstractmethod
    def update_one(self, product: Product) -> None:
        """Replace the stored record with the same id or raise EntityNotFoundError."""

    @abstractmethod
    def delete_one(self, product_id: int) -> None:
        """Remove a product by id or raise EntityNotFoundError."""
