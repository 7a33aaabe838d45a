"""Futures reference data service."""

from typing import List

from ..products import DeliveryMethod, Future
from .core import ProductService


class FutureService(ProductService[Future]):
    """Reference data over a set of futures of any kind, keyed by product id."""

    product_class = Future

    def get_futures(self, ticker: str) -> List[Future]:
        """All futures with the given exchange ticker."""
        return self.select(lambda future: future.ticker == ticker)

    def get_futures_by_delivery_method(self, method: DeliveryMethod) -> List[Future]:
        """All futures settled by the given delivery method."""
        return self.select(lambda future: future.delivery_method is method)

    def get_futures_by_underlying(self, product_id: str) -> List[Future]:
        """All futures whose underlying has the given product id."""
        return self.select(lambda future: future.underlying.product_id == product_id)
