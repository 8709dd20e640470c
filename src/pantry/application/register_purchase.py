"""Application service: Register Purchase use case.

Adds purchased quantities to inventory. A purchase only changes the
numeric stock; the stock level flag is left as it was.

Two phases keep a single call all-or-nothing:
  Phase 1 — validate every input (id format, product exists, quantity > 0)
            and build the Purchase.  Fails before any write.
  Phase 2 — add each quantity to its inventory row and persist.
"""

from __future__ import annotations

import structlog

from pantry.application.dto import PurchaseItemInput
from pantry.domain.exceptions import (
    EmptyPurchaseError,
    NonPositiveQuantityError,
    ProductNotFoundError,
)
from pantry.domain.model.inventory import InventoryItem
from pantry.domain.model.product import Product
from pantry.domain.model.purchase import Purchase, PurchaseItem
from pantry.domain.model.value_objects import ProductId, Quantity
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RegisterPurchaseHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo

    def handle(self, items: list[PurchaseItemInput]) -> Purchase:
        if not items:
            raise EmptyPurchaseError("Purchase must have at least one item")

        # Phase 1: validate everything
        products: dict[ProductId, Product] = {}
        purchase_items: list[PurchaseItem] = []

        for entry in items:
            pid = ProductId.from_string(entry.product_id)
            product = self._product_repo.find_by_id(pid)
            if product is None:
                raise ProductNotFoundError(entry.product_id)
            if entry.quantity <= 0:
                raise NonPositiveQuantityError(
                    f"Purchase quantity must be greater than 0, got {entry.quantity}"
                )
            products[pid] = product
            purchase_items.append(PurchaseItem(product_id=pid, quantity=Quantity(entry.quantity)))

        purchase = Purchase.create(purchase_items)

        # Phase 2: apply to inventory
        for line in purchase.items:
            existing = self._inventory_repo.find_by_product_id(line.product_id)
            if existing is not None:
                updated = existing.add_stock(line.quantity)
            else:
                updated = InventoryItem(
                    product_id=line.product_id,
                    current_stock=line.quantity,
                    unit_type=products[line.product_id].unit_type,
                )
            self._inventory_repo.save(updated)

        logger.info(
            "purchase_registered",
            purchase_id=purchase.id.value,
            items=len(purchase.items),
            total_quantity=purchase.total_quantity,
        )
        return purchase
