"""Domain service: Product Validator.

Holds the business rules that need more than one product to decide:
code value uniqueness and resolution of update keys. Checks never
mutate anything, so a handler can run all of them before touching
the record it is about to persist.
"""

from __future__ import annotations

from catalog.domain.exceptions import (
    AlreadyExistsError,
    EntityNotFoundError,
    KeyMismatchError,
)
from catalog.domain.model.product import Product, ProductKey, ProductPatch
from catalog.domain.model.value_objects import Expiration
from catalog.domain.repository.product_repository import ProductRepository


class ProductValidator:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check_new(self, candidate: Product) -> None:
        """Rules for a product about to be created.

        Order matters: a duplicate code value is reported before any
        field-level problem.
        """
        candidate.check_required_fields()
        if self._product_repo.exists(candidate.code_value):
            raise AlreadyExistsError("code_value already exists")
        Expiration.parse_valid(candidate.expiration)
        candidate.check_stock_bounds()

    def resolve_for_replace(self, key: ProductKey, candidate: Product) -> Product:
        """Locate the record a full update targets and check the candidate.

        A code value key that resolves to nothing while the candidate
        carries another code value is a key mismatch rather than a
        plain miss: the caller addressed a record that is neither the
        stored nor the requested one.
        """
        current = self._product_repo.find(key)
        if current is None:
            if isinstance(key, str) and key != candidate.code_value:
                raise KeyMismatchError("code_value mismatch")
            raise EntityNotFoundError("product not found")

        candidate.check_required_fields()
        self.check_code_value_change(current, candidate.code_value)
        Expiration.parse_valid(candidate.expiration)
        candidate.check_stock_bounds()
        return current

    def resolve_for_patch(self, key: ProductKey, patch: ProductPatch) -> Product:
        """Locate the record a partial update targets and check the patch.

        Only the fields the patch carries are checked. Quantity and
        price accept zero here since zero means "unchanged".
        """
        current = self._product_repo.find(key)
        if current is None:
            raise EntityNotFoundError("product not found")

        if patch.expiration:
            Expiration.parse_valid(patch.expiration)
        if patch.code_value:
            self.check_code_value_change(current, patch.code_value)
        patch.check_non_negative()
        return current

    def check_code_value_change(self, current: Product, code_value: str) -> None:
        """Reject a new code value that another product already uses."""
        if code_value == current.code_value:
            return
        owner = self._product_repo.get_by_code_value(code_value)
        if owner is not None and owner.id != current.id:
            raise AlreadyExistsError("code_value already exists")
