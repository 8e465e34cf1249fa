"""Product repository: lookups by id or code value on top of a store."""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product, ProductKey
from catalog.domain.repository.product_store import ProductStore


class ProductRepository:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    # --- Queries --------------------------------------------------------------

    def list_all(self) -> list[Product]:
        return self._store.get_all()

    def get_by_id(self, product_id: int) -> Product | None:
        try:
            return self._store.get_one(product_id)
        except EntityNotFoundError:
            return None

    def get_by_code_value(self, code_value: str) -> Product | None:
        """Return the first product in stored order with this code value."""
        for product in self._store.get_all():
            if product.code_value == code_value:
                return product
        return None

    def exists(self, code_value: str) -> bool:
        return self.get_by_code_value(code_value) is not None

    def find(self, key: ProductKey) -> Product | None:
        """Resolve an id (int) or a code value (str) to a product."""
        if isinstance(key, int):
            return self.get_by_id(key)
        return self.get_by_code_value(key)

    def search_by_price_gt(self, price: float) -> list[Product]:
        return [p for p in self._store.get_all() if p.price > price]

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> int:
        return self._store.add_one(product)

    def update(self, product: Product) -> None:
        self._store.update_one(product)

    def delete(self, product_id: int) -> None:
        self._store.delete_one(product_id)
