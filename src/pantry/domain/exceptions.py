"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
The three families mirror what went wrong: bad input, a missing entity, or a
clash with existing state.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


# --- Validation ---------------------------------------------------------------


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidFormatError(ValidationError):
    """An identifier is not a well-formed UUID."""


class NegativeQuantityError(ValidationError):
    """A quantity below zero was supplied."""


class NonPositiveQuantityError(ValidationError):
    """A purchased quantity was zero or negative."""


class InvalidUnitError(ValidationError):
    """A unit type outside the supported set was supplied."""


class InvalidStockLevelError(ValidationError):
    """A stock level outside high/medium/low/empty was supplied."""


class InvalidProductNameError(ValidationError):
    """A product name is empty or too short."""


class EmptyPurchaseError(ValidationError):
    """A purchase was registered without any items."""


# --- Not found ----------------------------------------------------------------


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(NotFoundError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with id {product_id} not found")
        self.product_id = product_id


class ProductNotFoundInInventoryError(NotFoundError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} not found in inventory")
        self.product_id = product_id


# --- Conflict -----------------------------------------------------------------


class ConflictError(DomainException):
    """The operation clashes with existing state."""


class DuplicateProductNameError(ConflictError):

    def __init__(self, name: str) -> None:
        super().__init__(f'Product with name "{name}" already exists')
        self.name = name


class DuplicateInShoppingListError(ConflictError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} is already in the shopping list")
        self.product_id = product_id
