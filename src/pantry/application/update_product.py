"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from pantry.domain.exceptions import DuplicateProductNameError, ProductNotFoundError
from pantry.domain.model.product import Product
from pantry.domain.model.value_objects import ProductId, UnitType
from pantry.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, name: str, unit_type: str) -> Product:
        """Rename a product and/or change its unit.

        Builds a new Product with the same id; the repository upserts it.
        """
        pid = ProductId.from_string(product_id)
        existing = self._product_repo.find_by_id(pid)
        if existing is None:
            raise ProductNotFoundError(product_id)

        new_name = name.strip()
        if existing.name.lower() != new_name.lower():
            clash = self._product_repo.find_by_name(new_name)
            if clash is not None and clash.id != pid:
                raise DuplicateProductNameError(new_name)

        updated = existing.with_changes(
            name=new_name, unit_type=UnitType.from_string(unit_type)
        )
        self._product_repo.save(updated)

        logger.info("product_updated", product_id=pid.value, name=updated.name)
        return updated
