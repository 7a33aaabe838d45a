"""Interest rate swap reference data service."""

from typing import List

from ..products import (
    DayCountConvention,
    FloatingIndex,
    InterestRateSwap,
    PaymentFrequency,
    SwapLegType,
    SwapType,
)
from .core import ProductService


class SwapService(ProductService[InterestRateSwap]):
    """Reference data over a set of interest rate swaps, keyed by product id.

    Example:
        service = SwapService([outright_10y, imm_2y])

        service.get_swaps_by_leg_type(SwapLegType.OUTRIGHT)  # both
        service.get_swaps_less_than(5)                       # [imm_2y]
        service.get_swaps(FloatingIndex.LIBOR)               # both
    """

    product_class = InterestRateSwap

    def get_swaps_by_day_count(
        self, convention: DayCountConvention
    ) -> List[InterestRateSwap]:
        """All swaps whose fixed leg uses the given day count convention."""
        return self.select(lambda swap: swap.fixed_leg_day_count is convention)

    def get_swaps_by_payment_frequency(
        self, frequency: PaymentFrequency
    ) -> List[InterestRateSwap]:
        """All swaps whose fixed leg pays at the given frequency."""
        return self.select(lambda swap: swap.fixed_leg_payment_frequency is frequency)

    def get_swaps_by_floating_index(self, index: FloatingIndex) -> List[InterestRateSwap]:
        """All swaps whose floating leg is on the given index."""
        return self.select(lambda swap: swap.floating_index is index)

    def get_swaps_greater_or_equal(self, term_years: int) -> List[InterestRateSwap]:
        """All swaps with a term of at least term_years."""
        return self.select(lambda swap: swap.term_years >= term_years)

    def get_swaps_less_than(self, term_years: int) -> List[InterestRateSwap]:
        """All swaps with a term strictly shorter than term_years."""
        return self.select(lambda swap: swap.term_years < term_years)

    def get_swaps_by_swap_type(self, swap_type: SwapType) -> List[InterestRateSwap]:
        return self.select(lambda swap: swap.swap_type is swap_type)

    def get_swaps_by_leg_type(self, leg_type: SwapLegType) -> List[InterestRateSwap]:
        return self.select(lambda swap: swap.swap_leg_type is leg_type)

    def get_swaps(self, criterion) -> List[InterestRateSwap]:
        """All swaps matching a convention value.

        Routes on the type of criterion: a DayCountConvention matches the
        fixed leg day count, a PaymentFrequency the fixed leg frequency,
        and FloatingIndex, SwapType or SwapLegType their own field.

        Raises:
            TypeError: If criterion is not one of those enums
        """
        queries = {
            DayCountConvention: self.get_swaps_by_day_count,
            PaymentFrequency: self.get_swaps_by_payment_frequency,
            FloatingIndex: self.get_swaps_by_floating_index,
            SwapType: self.get_swaps_by_swap_type,
            SwapLegType: self.get_swaps_by_leg_type,
        }
        query = queries.get(type(criterion))
        if query is None:
            raise TypeError(f"Cannot query swaps by {type(criterion).__name__}")
        return query(criterion)
