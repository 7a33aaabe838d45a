#!/usr/bin/env python3
"""
Reference Data Demo - Load sample bonds, swaps and futures and query them.

Usage:
    python examples/reference_data_demo.py
    python examples/reference_data_demo.py --log-level DEBUG
"""

import argparse
import logging
from datetime import date

from refdata import (
    Bond,
    BondFuture,
    BondIdType,
    BondService,
    Currency,
    DayCountConvention,
    EuroDollarFuture,
    FloatingIndex,
    FloatingIndexTenor,
    FloatingInterestRate,
    FutureService,
    InterestRateSwap,
    PaymentFrequency,
    SwapLegType,
    SwapService,
    SwapType,
)


def demo_futures():
    treasury = Bond("912828M56", BondIdType.CUSIP, "T", 2.25, date(2025, 11, 16))
    usd_libor_3m = FloatingInterestRate("USDLIBOR3M", 3, FloatingIndex.LIBOR, 0.0)

    service = FutureService()
    service.add(
        BondFuture("T-Bond Mar20", treasury, date(2020, 3, 1), 100000, 0.01, "ZB", "158-15")
    )
    service.add(
        BondFuture("T-Bond Jun20", treasury, date(2020, 6, 1), 100000, 0.01, "ZB", "158-11")
    )
    service.add(
        EuroDollarFuture(
            "Eurodollar Mar20", usd_libor_3m, date(2020, 3, 1), 1000000, 0.005, "GE", 98.12
        )
    )

    for product_id in service.product_ids():
        print(f"Future: {product_id} ==> {service.get_data(product_id)}")


def demo_swaps():
    outright_10y = InterestRateSwap(
        "Spot-Outright-10Y",
        DayCountConvention.THIRTY_360,
        DayCountConvention.THIRTY_360,
        PaymentFrequency.SEMI_ANNUAL,
        FloatingIndex.LIBOR,
        FloatingIndexTenor.TENOR_3M,
        date(2015, 11, 16),
        date(2025, 11, 16),
        Currency.USD,
        10,
        SwapType.SPOT,
        SwapLegType.OUTRIGHT,
    )
    imm_2y = InterestRateSwap(
        "IMM-Outright-2Y",
        DayCountConvention.THIRTY_360,
        DayCountConvention.THIRTY_360,
        PaymentFrequency.SEMI_ANNUAL,
        FloatingIndex.LIBOR,
        FloatingIndexTenor.TENOR_3M,
        date(2015, 12, 20),
        date(2017, 12, 20),
        Currency.USD,
        2,
        SwapType.IMM,
        SwapLegType.OUTRIGHT,
    )
    service = SwapService([outright_10y, imm_2y])

    queries = [
        ("OUTRIGHT swap leg type", service.get_swaps(SwapLegType.OUTRIGHT)),
        ("SPOT swap type", service.get_swaps(SwapType.SPOT)),
        ("less than 5 year tenor", service.get_swaps_less_than(5)),
        ("LIBOR floating index", service.get_swaps(FloatingIndex.LIBOR)),
        ("30/360 day count convention", service.get_swaps(DayCountConvention.THIRTY_360)),
    ]
    for description, swaps in queries:
        print(f"Swaps with {description}: found {len(swaps)}")


def demo_bonds():
    service = BondService()
    service.add(Bond("912828M56", BondIdType.CUSIP, "T", 2.25, date(2025, 11, 16)))
    service.add(Bond("912828TW0", BondIdType.CUSIP, "T", 0.75, date(2017, 11, 5)))

    for ticker in ("T", "P"):
        print(f"Bonds with ticker '{ticker}': found {len(service.get_bonds(ticker))}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Load and query sample reference data",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("\n---- Future service ----")
    demo_futures()
    print("\n---- Swap service ----")
    demo_swaps()
    print("\n---- Bond service ----")
    demo_bonds()


if __name__ == "__main__":
    main()
