"""JSON-file-backed implementation of ProductStore.

Every call reads the whole file and every mutation rewrites it. There is
no locking: two processes writing at once can lose an update.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

from catalog.domain.exceptions import EntityNotFoundError, StorageError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_store import ProductStore

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = frozenset({"id", "name", "quantity", "code_value", "expiration", "price"})


class JsonProductStore(ProductStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductStore interface -----------------------------------------------

    def get_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def get_one(self, product_id: int) -> Product:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        raise EntityNotFoundError("product not found")

    def add_one(self, product: Product) -> int:
        records = self._load_raw()
        next_id = max((raw["id"] for raw in records), default=0) + 1
        records.append(self._to_raw(replace(product, id=next_id)))
        self._persist_raw(records)
        return next_id

    def update_one(self, product: Product) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                self._persist_raw(records)
                return
        raise EntityNotFoundError("product not found")

    def delete_one(self, product_id: int) -> None:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != product_id]
        if len(remaining) == len(records):
            raise EntityNotFoundError("product not found")
        self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "quantity": product.quantity,
            "code_value": product.code_value,
            "is_published": product.is_published,
            "expiration": product.expiration,
            "price": product.price,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            quantity=raw["quantity"],
            code_value=raw["code_value"],
            expiration=raw["expiration"],
            price=raw["price"],
            is_published=raw.get("is_published", False),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Cannot read %s: %s", self._file_path, exc)
            raise StorageError(f"can not read file {self._file_path}") from exc
        if not isinstance(records, list):
            raise StorageError(f"{self._file_path} does not hold a JSON array")
        for position, raw in enumerate(records):
            if not isinstance(raw, dict) or not _REQUIRED_KEYS.issubset(raw):
                logger.error("Malformed record #%d in %s", position, self._file_path)
                raise StorageError(
                    f"{self._file_path} holds a malformed product at position {position}"
                )
        logger.debug("Loaded %d products from %s", len(records), self._file_path)
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("Cannot write %s: %s", self._file_path, exc)
            raise StorageError(f"can not write file {self._file_path}") from exc
        logger.debug("Saved %d products to %s", len(records), self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise StorageError(f"can not open file {self._file_path}") from exc
