"""Exceptions for the refdata package."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .products.base import ProductType


class RefDataError(Exception):
    """Base exception for all reference data errors."""

    pass


class ProductConstructionError(RefDataError, ValueError):
    """A product could not be constructed from the given arguments."""

    pass


class IncompatibleUnderlyingError(ProductConstructionError):
    """Underlying product kind doesn't match what the future requires."""

    def __init__(self, product_id: str, expected: "ProductType", actual: "ProductType"):
        self.product_id = product_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Future {product_id} expects a {expected.name} underlying, "
            f"got {actual.name}"
        )


class TypeMismatchError(RefDataError, TypeError):
    """Product class doesn't match the class the service stores."""

    def __init__(self, product_id: str, expected: type, actual: type):
        self.product_id = product_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Product {product_id} expects {expected.__name__}, got {actual.__name__}"
        )


class NotFoundError(RefDataError, KeyError):
    """No product stored under the requested id."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"No product with id: {product_id}")
