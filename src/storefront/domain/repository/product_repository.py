"""Abstract repositories for Product snapshots.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductLookup(ABC):
    """Read-only view of the catalog used when placing orders."""

    @abstractmethod
    def get_by_ids(self, product_ids: set[str]) -> dict[str, Product]:
        """Return the products that exist among ``product_ids``, keyed by ID.

        Unknown IDs are absent from the result rather than raising.
        """


class ProductRepository(ProductLookup):
    """Catalog maintenance on top of the lookup."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
