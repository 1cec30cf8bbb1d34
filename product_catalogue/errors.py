from typing import Any, Iterable


class CatalogueError(Exception):
    """Base class for catalogue request failures."""


class BadBatch(CatalogueError):
    def __init__(self, reason: str, product_ids: Iterable[str] = ()):
        self.product_ids = sorted(product_ids)
        self.reason = reason
        detail = f": {', '.join(self.product_ids)}" if self.product_ids else ""
        super().__init__(f"Bad Batch - {reason}{detail}")


class BadSearch(CatalogueError):
    def __init__(self, reason: str, criteria: Any = None):
        self.criteria = criteria
        self.reason = reason
        super().__init__(f"Bad Search - {reason}")
