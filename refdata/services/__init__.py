"""Keyed reference data services.

Each service owns the products of one kind, keyed by product id, and
answers lookups by id and queries by attribute.

Quick Start:
    from refdata.services import BondService

    service = BondService()
    service.add(treasury_10y)
    service.add(treasury_2y)

    service.get_data("912828M56")  # treasury_10y
    service.get_data("UNKNOWN")    # None
    service.get_bonds("T")         # [treasury_10y, treasury_2y]

Key Classes:
    - Service: Abstract keyed service (get_data)
    - ProductService: In-memory service with add() and select()
    - BondService, SwapService, FutureService: Per-kind queries
"""

from .base import Service
from .core import ProductService
from .bond import BondService
from .swap import SwapService
from .future import FutureService

__all__ = [
    "Service",
    "ProductService",
    "BondService",
    "SwapService",
    "FutureService",
]
