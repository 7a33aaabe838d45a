"""Abstract base class for keyed reference data services."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Service(ABC, Generic[K, V]):
    """Abstract keyed service.

    A service owns reference data of one kind, keyed by K. Callers and
    generic algorithms can be written against this capability rather than
    any concrete service.
    """

    @abstractmethod
    def get_data(self, key: K) -> Optional[V]:
        """Retrieve the value stored under key.

        Args:
            key: The lookup key (e.g., a product id)

        Returns:
            The stored value if found, None otherwise. A miss never
            inserts anything.
        """
        pass
