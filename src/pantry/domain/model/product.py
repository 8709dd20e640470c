"""Product aggregate.

Products live independently of stock: a product can exist in the catalog
before it has ever been bought. Products are immutable; an "update" builds
a new instance that the repository upserts by id.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from pantry.domain.exceptions import InvalidProductNameError
from pantry.domain.model.value_objects import ProductId, UnitType

MIN_NAME_LENGTH = 2


@dataclass(frozen=True)
class Product:
    """A product in the household catalog."""

    id: ProductId
    name: str
    unit_type: UnitType = UnitType.UNITS

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidProductNameError("Product name cannot be empty")
        if len(self.name.strip()) < MIN_NAME_LENGTH:
            raise InvalidProductNameError(
                f"Product name must be at least {MIN_NAME_LENGTH} characters"
            )

    def with_changes(
        self,
        name: str | None = None,
        unit_type: UnitType | None = None,
    ) -> Product:
        """Return a copy with the given fields replaced, same identity."""
        return replace(
            self,
            name=self.name if name is None else name,
            unit_type=self.unit_type if unit_type is None else unit_type,
        )
