from abc import ABC, abstractmethod
from typing import List, Optional, Set

from product_catalogue.models import Product


class AbstractProductStore(ABC):
    """Abstract interface for the id-keyed product collection a catalogue owns."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Stores a product under its id, replacing any existing entry."""
        raise NotImplementedError

    @abstractmethod
    def get(self, product_id: str) -> Optional[Product]:
        """Returns the product stored under the id, or None."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, product_id: str) -> Optional[Product]:
        """Removes and returns the product stored under the id, or None."""
        raise NotImplementedError

    @abstractmethod
    def ids(self) -> Set[str]:
        raise NotImplementedError

    @abstractmethod
    def all(self) -> List[Product]:
        """All stored products in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    def __contains__(self, product_id: object) -> bool:
        return isinstance(product_id, str) and self.get(product_id) is not None
