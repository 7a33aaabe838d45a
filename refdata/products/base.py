"""Base classes for reference data products."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ProductType(Enum):
    """Kind tag carried by every product."""

    BOND = "Bond"
    SWAP = "Swap"
    FUTURE = "Future"
    INTEREST_RATE = "InterestRate"

    def __str__(self) -> str:
        return self.value


class Convention(Enum):
    """Enum whose value is the market display label."""

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Product:
    """
    Base class for all reference data products.

    Products are immutable values identified by ``product_id``. Each
    concrete product class fixes its own ``product_type``, so the tag
    always matches the kind of product and cannot be changed.

    Example:
        bond = Bond("912828M56", BondIdType.CUSIP, "T", 2.25, date(2025, 11, 16))
        bond.product_id    # "912828M56"
        bond.product_type  # ProductType.BOND
    """

    product_type: ClassVar[ProductType]

    product_id: str

    def __post_init__(self):
        if getattr(type(self), "product_type", None) is None:
            raise TypeError(
                f"{type(self).__name__} has no product_type and cannot be constructed"
            )

    def summary(self) -> str:
        """
        Human-readable one line summary of the product.

        Override in subclasses to provide product-specific summaries.
        """
        return f"{type(self).__name__} {self.product_id}"

    def __str__(self) -> str:
        return self.summary()
