"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_files import (
    decoding,
    ensure_file,
    load_records,
    locked,
    write_records,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_ids(self, product_ids: set[str]) -> dict[str, Product]:
        products = self._load()
        return {pid: products[pid] for pid in product_ids if pid in products}

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with locked(self._file_path):
            products = self._load()
            products[product.id] = product
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        records = load_records(self._file_path)
        with decoding(self._file_path):
            return {
                item["id"]: Product(
                    id=item["id"],
                    name=item["name"],
                    price=Money(Decimal(item["price"])),
                    active=item.get("active", True),
                    code=item.get("code", ""),
                    description=item.get("description", ""),
                )
                for item in records
            }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "code": p.code,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "active": p.active,
            }
            for p in products.values()
        ]
        write_records(self._file_path, raw)
