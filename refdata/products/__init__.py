"""Reference data products."""

from .base import Convention, Product, ProductType
from .fixedincome import (
    Bond,
    BondIdType,
    Currency,
    DayCountConvention,
    FloatingIndex,
    FloatingIndexTenor,
    FloatingInterestRate,
    InterestRateSwap,
    PaymentFrequency,
    SwapLegType,
    SwapType,
)
from .derivatives import BondFuture, DeliveryMethod, EuroDollarFuture, Future

__all__ = [
    # Base
    "Product",
    "ProductType",
    "Convention",
    # Fixed Income
    "Bond",
    "InterestRateSwap",
    "FloatingInterestRate",
    "BondIdType",
    "DayCountConvention",
    "PaymentFrequency",
    "FloatingIndex",
    "FloatingIndexTenor",
    "Currency",
    "SwapType",
    "SwapLegType",
    # Derivatives
    "Future",
    "BondFuture",
    "EuroDollarFuture",
    "DeliveryMethod",
]
