"""Bond reference data service."""

from typing import List

from ..products import Bond, BondIdType
from .core import ProductService


class BondService(ProductService[Bond]):
    """Reference data over a set of bonds, keyed by product id (CUSIP or ISIN)."""

    product_class = Bond

    def get_bonds(self, ticker: str) -> List[Bond]:
        """All bonds with the given ticker."""
        return self.select(lambda bond: bond.ticker == ticker)

    def get_bonds_by_id_type(self, id_type: BondIdType) -> List[Bond]:
        """All bonds identified with the given scheme."""
        return self.select(lambda bond: bond.id_type is id_type)
