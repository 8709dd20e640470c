"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. A single JsonFileStore
is created here and shared by every repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pantry.infrastructure.config import Settings
from pantry.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from pantry.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pantry.infrastructure.persistence.json_shopping_list_repository import (
    JsonShoppingListRepository,
)
from pantry.infrastructure.storage.json_file_store import JsonFileStore


@dataclass(frozen=True)
class Container:
    store: JsonFileStore
    products: JsonProductRepository
    inventory: JsonInventoryRepository
    shopping_list: JsonShoppingListRepository


def build_container(settings: Settings, data_dir: Path | None = None) -> Container:
    store = JsonFileStore(data_dir or settings.DATA_DIR, settings.STORAGE_PREFIX)
    return Container(
        store=store,
        products=JsonProductRepository(store),
        inventory=JsonInventoryRepository(store),
        shopping_list=JsonShoppingListRepository(store),
    )
