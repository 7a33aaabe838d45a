"""Futures and their bond / interest rate variants."""

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar, Optional

from ..exceptions import IncompatibleUnderlyingError
from .base import Convention, Product, ProductType


class DeliveryMethod(Convention):
    CASH = "Cash"
    PHYSICAL = "Physical"


@dataclass(frozen=True)
class Future(Product):
    """
    Futures contract on an underlying product.

    The underlying is held by value. Products are immutable, so the future
    always sees the underlying's terms as they were at construction.

    Subclasses that require a specific kind of underlying set
    ``underlying_type``; construction then fails with
    IncompatibleUnderlyingError if the underlying has any other kind.

    Example:
        future = Future(
            "ZB-Mar20",
            underlying=treasury,
            maturity_date=date(2020, 3, 1),
            notional=100000,
            tick_size=0.01,
            ticker="ZB",
            delivery_method=DeliveryMethod.PHYSICAL,
        )
    """

    product_type: ClassVar[ProductType] = ProductType.FUTURE
    underlying_type: ClassVar[Optional[ProductType]] = None

    underlying: Product
    maturity_date: date
    notional: float
    tick_size: float
    ticker: str
    delivery_method: DeliveryMethod

    def __post_init__(self):
        super().__post_init__()
        expected = self.underlying_type
        if expected is not None and self.underlying.product_type is not expected:
            raise IncompatibleUnderlyingError(
                self.product_id, expected, self.underlying.product_type
            )

    def summary(self) -> str:
        """Summary of contract terms: {ticker} {maturity} {delivery} on {underlying}."""
        return (
            f"{self.ticker} {self.maturity_date.isoformat()} "
            f"{self.delivery_method} on {self.underlying.product_id}"
        )


@dataclass(frozen=True)
class BondFuture(Future):
    """
    Physically delivered future on a bond.

    The price quote is kept in its fractional exchange format,
    e.g. "158-15" for 158 and 15/32nds.

    Example:
        future = BondFuture(
            "T-Bond Mar20",
            underlying=treasury,
            maturity_date=date(2020, 3, 1),
            notional=100000,
            tick_size=0.01,
            ticker="ZB",
            price_quote="158-15",
        )
        future.delivery_method  # DeliveryMethod.PHYSICAL
    """

    underlying_type: ClassVar[Optional[ProductType]] = ProductType.BOND

    delivery_method: DeliveryMethod = field(
        default=DeliveryMethod.PHYSICAL, init=False
    )
    price_quote: str

    def summary(self) -> str:
        return f"{super().summary()} @ {self.price_quote}"


@dataclass(frozen=True)
class EuroDollarFuture(Future):
    """
    Cash settled future on a floating interest rate.

    A Eurodollar future's price moves with the rate offered on US dollar
    deposits held in European banks.

    Example:
        future = EuroDollarFuture(
            "Eurodollar Mar20",
            underlying=usd_libor_3m,
            maturity_date=date(2020, 3, 1),
            notional=1000000,
            tick_size=0.005,
            ticker="GE",
            price_quote=98.12,
        )
        future.delivery_method  # DeliveryMethod.CASH
    """

    underlying_type: ClassVar[Optional[ProductType]] = ProductType.INTEREST_RATE

    delivery_method: DeliveryMethod = field(default=DeliveryMethod.CASH, init=False)
    price_quote: float

    def summary(self) -> str:
        return f"{super().summary()} @ {self.price_quote:g}"
