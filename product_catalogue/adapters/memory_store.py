from typing import Dict, List, Optional, Set

from product_catalogue.models import Product
from product_catalogue.service.ports import AbstractProductStore
from shared.logging import get_logger

logger = get_logger(__name__)

class InMemoryProductStore(AbstractProductStore):
    """Concrete implementation of the product store backed by an insertion-ordered dict."""

    def __init__(self):
        self._products: Dict[str, Product] = {}

    def add(self, product: Product) -> None:
        if product.id in self._products:
            logger.debug(f"Replacing stored product with id: {product.id}")
        self._products[product.id] = product

    def get(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def remove(self, product_id: str) -> Optional[Product]:
        return self._products.pop(product_id, None)

    def ids(self) -> Set[str]:
        return set(self._products)

    def all(self) -> List[Product]:
        return list(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products
