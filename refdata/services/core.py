"""In-memory product service shared by the concrete services."""

import logging
import threading
from typing import (
    Callable,
    ClassVar,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Type,
    TypeVar,
)

from ..exceptions import NotFoundError, TypeMismatchError
from ..products import Product
from .base import Service

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Product)


class ProductService(Service[str, P]):
    """In-memory service keyed by product id.

    Owns a mapping from product id to product. Products are immutable, so
    storing the value is as good as storing a copy: nothing a caller does
    afterwards can change a stored entry.

    Every query is built on select(), which returns all stored products
    matching a predicate. A per-service lock serializes add() against
    reads so a query never sees a half-inserted entry.

    Example:
        service = BondService()
        service.add(bond)

        service.get_data("912828M56")   # bond
        service.get_data("UNKNOWN")     # None
        service["UNKNOWN"]              # raises NotFoundError

        service.select(lambda b: b.coupon > 1.0)
    """

    product_class: ClassVar[Type[Product]] = Product

    def __init__(self, products: Optional[Iterable[P]] = None):
        self._products: Dict[str, P] = {}
        self._lock = threading.RLock()
        for product in products or ():
            self.add(product)

    def add(self, product: P) -> None:
        """Store product under its id, replacing any existing entry.

        Raises:
            TypeMismatchError: If product is not an instance of product_class
        """
        if not isinstance(product, self.product_class):
            raise TypeMismatchError(
                getattr(product, "product_id", repr(product)),
                self.product_class,
                type(product),
            )
        with self._lock:
            if product.product_id in self._products:
                logger.debug(
                    "%s replacing %s", type(self).__name__, product.product_id
                )
            else:
                logger.debug("%s adding %s", type(self).__name__, product.product_id)
            self._products[product.product_id] = product

    def get_data(self, product_id: str) -> Optional[P]:
        """Retrieve product by id.

        Returns:
            The stored product, or None if no product has that id
        """
        with self._lock:
            product = self._products.get(product_id)
        if product is None:
            logger.debug("%s has no product %s", type(self).__name__, product_id)
        return product

    def select(self, predicate: Callable[[P], bool]) -> List[P]:
        """Return all stored products for which predicate holds, in id order."""
        with self._lock:
            return [
                self._products[product_id]
                for product_id in sorted(self._products)
                if predicate(self._products[product_id])
            ]

    def product_ids(self) -> List[str]:
        """Ids of all stored products, sorted."""
        with self._lock:
            return sorted(self._products)

    def __getitem__(self, product_id: str) -> P:
        """Retrieve product by id.

        Raises:
            NotFoundError: If no product has that id
        """
        product = self.get_data(product_id)
        if product is None:
            raise NotFoundError(product_id)
        return product

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._products

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __iter__(self) -> Iterator[P]:
        return iter(self.select(lambda product: True))
