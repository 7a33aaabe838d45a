"""
refdata - In-memory reference data for financial products.

Submodules:
    refdata.products - Immutable product taxonomy (bonds, swaps, futures, rates)
    refdata.services - Keyed services with lookup by id and attribute queries
    refdata.exceptions - Error types raised by the package
"""

from .products import (
    Product,
    ProductType,
    Bond,
    BondIdType,
    InterestRateSwap,
    FloatingInterestRate,
    DayCountConvention,
    PaymentFrequency,
    FloatingIndex,
    FloatingIndexTenor,
    Currency,
    SwapType,
    SwapLegType,
    Future,
    BondFuture,
    EuroDollarFuture,
    DeliveryMethod,
)
from .services import Service, ProductService, BondService, SwapService, FutureService
from .exceptions import (
    RefDataError,
    ProductConstructionError,
    IncompatibleUnderlyingError,
    TypeMismatchError,
    NotFoundError,
)
from . import products
from . import services

__all__ = [
    # Submodules
    "products",
    "services",
    # Products
    "Product",
    "ProductType",
    "Bond",
    "BondIdType",
    "InterestRateSwap",
    "FloatingInterestRate",
    "DayCountConvention",
    "PaymentFrequency",
    "FloatingIndex",
    "FloatingIndexTenor",
    "Currency",
    "SwapType",
    "SwapLegType",
    "Future",
    "BondFuture",
    "EuroDollarFuture",
    "DeliveryMethod",
    # Services
    "Service",
    "ProductService",
    "BondService",
    "SwapService",
    "FutureService",
    # Exceptions
    "RefDataError",
    "ProductConstructionError",
    "IncompatibleUnderlyingError",
    "TypeMismatchError",
    "NotFoundError",
]

__version__ = "0.1.0"
