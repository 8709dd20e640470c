"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pantry.domain.model.product import Product
from pantry.domain.model.value_objects import ProductId


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> None:
        """Insert or replace the product with the same id."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def find_by_id(self, product_id: ProductId) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_name(self, name: str) -> Product | None:
        """Return the product whose name matches, ignoring case, or None."""

    @abstractmethod
    def delete(self, product_id: ProductId) -> None:
        """Remove a product.

        Raises ProductNotFoundError if it does not exist.
        """
