"""Application service: Finish Shopping use case.

Closes a shopping trip: every checked item is registered as purchased
and the shopping list is then rebuilt from inventory.

Note that the rebuild discards manual entries, exactly as
RecalculateShoppingList does on its own.
"""

from __future__ import annotations

from pantry.application.dto import PurchaseItemInput
from pantry.application.recalculate_shopping_list import RecalculateShoppingListHandler
from pantry.application.register_purchase import RegisterPurchaseHandler
from pantry.domain.model.purchase import Purchase
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.repository.product_repository import ProductRepository
from pantry.domain.repository.shopping_list_repository import ShoppingListRepository

DEFAULT_QUANTITY = 1


class FinishShoppingHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
        shopping_list_repo: ShoppingListRepository,
    ) -> None:
        self._shopping_list_repo = shopping_list_repo
        self._register = RegisterPurchaseHandler(product_repo, inventory_repo)
        self._recalculate = RecalculateShoppingListHandler(shopping_list_repo, inventory_repo)

    def handle(self, quantities: dict[str, int] | None = None) -> Purchase:
        """Register the checked items as a purchase, then reconcile.

        Args:
            quantities: Optional mapping of product id -> quantity bought.
                Checked items missing from it count as DEFAULT_QUANTITY.
        """
        quantities = quantities or {}
        checked = self._shopping_list_repo.get_checked_items()

        purchase = self._register.handle(
            [
                PurchaseItemInput(
                    product_id=item.product_id.value,
                    quantity=quantities.get(item.product_id.value, DEFAULT_QUANTITY),
                )
                for item in checked
            ]
        )
        self._recalculate.handle()
        return purchase
