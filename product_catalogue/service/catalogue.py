from collections import Counter
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from product_catalogue.adapters.memory_store import InMemoryProductStore
from product_catalogue.errors import BadBatch, BadSearch
from product_catalogue.models import Batch, Product, ReorderReport, SearchCriteria, SearchResult
from product_catalogue.service.ports import AbstractProductStore
from shared.logging import get_logger
from shared.settings import settings

logger = get_logger(__name__)

class Catalogue:
    """
    A named, in-memory collection of products keyed by id.

    Lookups report absence with None. Structurally invalid batch and search
    requests raise BadBatch / BadSearch. Not safe for concurrent writers;
    callers sharing an instance across threads must serialize access.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        store: Optional[AbstractProductStore] = None,
        keyword_case_sensitive: Optional[bool] = None,
    ):
        self.name = name if name is not None else settings.DEFAULT_CATALOGUE_NAME
        self.store = store if store is not None else InMemoryProductStore()
        if keyword_case_sensitive is None:
            keyword_case_sensitive = settings.SEARCH_KEYWORD_CASE_SENSITIVE
        self.keyword_case_sensitive = keyword_case_sensitive

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self.store

    def __repr__(self) -> str:
        return f"Catalogue(name={self.name!r}, products={len(self.store)})"

    @property
    def products(self) -> List[Product]:
        return self.store.all()

    def add_product(self, product: Product) -> None:
        # Unconditional: an existing entry with the same id is overwritten
        logger.info(f"Catalogue '{self.name}': adding product {product.id}")
        self.store.add(product)

    def find_product_by_id(self, product_id: str) -> Optional[Product]:
        product = self.store.get(product_id)
        if product is None:
            logger.debug(f"Catalogue '{self.name}': no product with id {product_id}")
        return product

    def remove_product_by_id(self, product_id: str) -> Optional[Product]:
        removed = self.store.remove(product_id)
        if removed is not None:
            logger.info(f"Catalogue '{self.name}': removed product {product_id}")
        else:
            logger.debug(f"Catalogue '{self.name}': nothing to remove for id {product_id}")
        return removed

    def batch_add_products(self, batch: Union[Batch, Mapping[str, Any]]) -> int:
        """
        Adds every product of the batch with non-zero stock, or nothing at all.

        The whole batch is checked before the catalogue is touched: any id
        already present in the catalogue, or repeated inside the batch, fails
        the request with BadBatch. Zero-stock entries are skipped silently.
        Returns the number of products added.
        """
        try:
            batch = Batch.model_validate(batch)
        except ValidationError as e:
            logger.warning(f"Catalogue '{self.name}': rejected malformed batch: {e.errors()}")
            raise BadBatch("malformed batch request") from e

        incoming_ids = [product.id for product in batch.products]

        # Phase 1 - validate against current contents without mutating
        existing_ids = self.store.ids()
        collisions = existing_ids.intersection(incoming_ids)
        if collisions:
            logger.warning(f"Catalogue '{self.name}': batch rejected, ids already present: {sorted(collisions)}")
            raise BadBatch("product id already in catalogue", collisions)

        repeated = [product_id for product_id, count in Counter(incoming_ids).items() if count > 1]
        if repeated:
            logger.warning(f"Catalogue '{self.name}': batch rejected, ids repeated in batch: {sorted(repeated)}")
            raise BadBatch("product id repeated within batch", repeated)

        # Phase 2 - stage the accepted products, then commit them
        staged = [product for product in batch.products if product.quantityInStock > 0]
        skipped = len(batch.products) - len(staged)
        if skipped:
            logger.info(f"Catalogue '{self.name}': skipping {skipped} zero-stock product(s) in batch")

        for product in staged:
            self.store.add(product)

        logger.info(f"Catalogue '{self.name}': batch added {len(staged)} product(s)")
        return len(staged)

    def check_reorders(self) -> ReorderReport:
        product_ids = [product.id for product in self.store.all() if product.needs_reorder]
        logger.debug(f"Catalogue '{self.name}': {len(product_ids)} product(s) at or below reorder level")
        return ReorderReport(productIds=product_ids)

    def search(self, criteria: Union[SearchCriteria, Mapping[str, Any]]) -> SearchResult:
        """
        Finds products by price ceiling or by name keyword.

        Exactly one of ``price`` or ``keyword`` must be given. Price matches are
        inclusive. Keyword matches are substring matches, case-sensitive unless
        the catalogue was configured otherwise.
        """
        try:
            criteria = SearchCriteria.model_validate(criteria)
        except ValidationError as e:
            logger.warning(f"Catalogue '{self.name}': rejected search criteria: {e.errors()}")
            raise BadSearch("criteria must give exactly one of 'price' or 'keyword'", criteria) from e

        if criteria.price is not None:
            matches = [product.id for product in self.store.all() if product.price <= criteria.price]
        else:
            matches = [product.id for product in self.store.all() if self._name_matches(product.name, criteria.keyword)]

        logger.debug(f"Catalogue '{self.name}': search {criteria.model_dump(exclude_none=True)} matched {len(matches)} product(s)")
        return SearchResult(searchedProducts=matches)

    def _name_matches(self, name: str, keyword: str) -> bool:
        if self.keyword_case_sensitive:
            return keyword in name
        return keyword.casefold() in name.casefold()
