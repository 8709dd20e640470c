"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from enum import Enum

from pantry.domain.exceptions import (
    InvalidFormatError,
    InvalidStockLevelError,
    InvalidUnitError,
    NegativeQuantityError,
    ValidationError,
)

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def _check_uuid(value: object) -> None:
    if not isinstance(value, str) or not _UUID_PATTERN.match(value):
        raise InvalidFormatError(f"Invalid UUID format: {value!r}")


@dataclass(frozen=True)
class ProductId:
    """Identity of a product, a UUID-formatted string."""

    value: str

    def __post_init__(self) -> None:
        _check_uuid(self.value)

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def from_string(raw: str) -> ProductId:
        return ProductId(raw)

    @staticmethod
    def generate() -> ProductId:
        return ProductId(str(uuid.uuid4()))


@dataclass(frozen=True)
class PurchaseId:
    """Identity of a single registered purchase."""

    value: str

    def __post_init__(self) -> None:
        _check_uuid(self.value)

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def from_string(raw: str) -> PurchaseId:
        return PurchaseId(raw)

    @staticmethod
    def generate() -> PurchaseId:
        return PurchaseId(str(uuid.uuid4()))


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer amount of stock.

    Zero is a legitimate stock count; only purchases require a strictly
    positive amount (see ``PurchaseItem``).
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise NegativeQuantityError(
                f"Quantity cannot be negative, got {self.value}"
            )

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def zero() -> Quantity:
        return Quantity(0)


class UnitType(Enum):
    UNITS = "units"
    KG = "kg"
    LITERS = "liters"

    @classmethod
    def from_string(cls, raw: str) -> UnitType:
        try:
            return cls(raw)
        except ValueError as exc:
            allowed = ", ".join(u.value for u in cls)
            raise InvalidUnitError(
                f"Invalid unit type {raw!r} (expected one of: {allowed})"
            ) from exc

    def __str__(self) -> str:
        return self.value


class StockLevel(Enum):
    """Coarse, user-set judgment of remaining stock.

    Members are declared from most to least stock.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    EMPTY = "empty"

    @classmethod
    def from_string(cls, raw: str) -> StockLevel:
        try:
            return cls(raw)
        except ValueError as exc:
            raise InvalidStockLevelError(f"Invalid stock level: {raw!r}") from exc

    def __str__(self) -> str:
        return self.value
