"""Fixed income products: bonds, interest rate swaps and floating rates."""

from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from .base import Convention, Product, ProductType


class BondIdType(Convention):
    """Bond identifier scheme: CUSIP (US) or ISIN (primarily Europe)."""

    CUSIP = "CUSIP"
    ISIN = "ISIN"


class DayCountConvention(Convention):
    THIRTY_360 = "30/360"
    ACT_360 = "Act/360"
    ACT_365 = "Act/365"


class PaymentFrequency(Convention):
    QUARTERLY = "Quarterly"
    SEMI_ANNUAL = "Semi-Annual"
    ANNUAL = "Annual"


class FloatingIndex(Convention):
    LIBOR = "LIBOR"
    EURIBOR = "EURIBOR"


class FloatingIndexTenor(Convention):
    TENOR_1M = "1m"
    TENOR_3M = "3m"
    TENOR_6M = "6m"
    TENOR_12M = "12m"


class Currency(Convention):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


class SwapType(Convention):
    SPOT = "Standard"
    FORWARD = "Forward"
    IMM = "IMM"
    MAC = "MAC"
    BASIS = "Basis"


class SwapLegType(Convention):
    """Swap structure: outright is one leg, curve is two legs, fly is three legs."""

    OUTRIGHT = "Outright"
    CURVE = "Curve"
    FLY = "Fly"


@dataclass(frozen=True)
class Bond(Product):
    """
    Fixed coupon bond reference data.

    The coupon is quoted in percent and is not validated; zero and
    negative coupons are accepted.

    Example:
        bond = Bond(
            "912828M56",
            BondIdType.CUSIP,
            ticker="T",
            coupon=2.25,
            maturity_date=date(2025, 11, 16),
        )
        print(bond)  # "T 2.25 2025-11-16"
    """

    product_type: ClassVar[ProductType] = ProductType.BOND

    id_type: BondIdType
    ticker: str
    coupon: float
    maturity_date: date

    def summary(self) -> str:
        """Summary of key bond terms: {ticker} {coupon} {maturity}."""
        return f"{self.ticker} {self.coupon:g} {self.maturity_date.isoformat()}"


@dataclass(frozen=True)
class InterestRateSwap(Product):
    """
    Fixed-for-floating interest rate swap reference data.

    The termination date is not checked against the effective date;
    forward-dated and back-dated terms are stored as given.

    Example:
        swap = InterestRateSwap(
            "Spot-Outright-10Y",
            fixed_leg_day_count=DayCountConvention.THIRTY_360,
            floating_leg_day_count=DayCountConvention.THIRTY_360,
            fixed_leg_payment_frequency=PaymentFrequency.SEMI_ANNUAL,
            floating_index=FloatingIndex.LIBOR,
            floating_index_tenor=FloatingIndexTenor.TENOR_3M,
            effective_date=date(2015, 11, 16),
            termination_date=date(2025, 11, 16),
            currency=Currency.USD,
            term_years=10,
            swap_type=SwapType.SPOT,
            swap_leg_type=SwapLegType.OUTRIGHT,
        )
    """

    product_type: ClassVar[ProductType] = ProductType.SWAP

    fixed_leg_day_count: DayCountConvention
    floating_leg_day_count: DayCountConvention
    fixed_leg_payment_frequency: PaymentFrequency
    floating_index: FloatingIndex
    floating_index_tenor: FloatingIndexTenor
    effective_date: date
    termination_date: date
    currency: Currency
    term_years: int
    swap_type: SwapType
    swap_leg_type: SwapLegType

    def summary(self) -> str:
        return (
            f"fixedDayCount:{self.fixed_leg_day_count} "
            f"floatingDayCount:{self.floating_leg_day_count} "
            f"paymentFreq:{self.fixed_leg_payment_frequency} "
            f"{self.floating_index_tenor}{self.floating_index} "
            f"effective:{self.effective_date.isoformat()} "
            f"termination:{self.termination_date.isoformat()} "
            f"{self.currency} {self.term_years}yrs "
            f"{self.swap_type} {self.swap_leg_type}"
        )


@dataclass(frozen=True)
class FloatingInterestRate(Product):
    """
    Floating interest rate index plus a spread.

    Used as the underlying of a EuroDollarFuture.

    Example:
        rate = FloatingInterestRate("USDLIBOR3M", 3, FloatingIndex.LIBOR, 0.0)
    """

    product_type: ClassVar[ProductType] = ProductType.INTEREST_RATE

    tenor_months: int
    floating_index: FloatingIndex
    spread: float

    def summary(self) -> str:
        """Summary of the rate: {tenor}m{index} +{spread}."""
        return f"{self.tenor_months}m{self.floating_index} +{self.spread:g}"
