"""In-process catalog store, used for dry runs and tests."""

import copy
from typing import Any, Dict, List, Optional

from ..models import CatalogProduct
from .base import CatalogStore, document_to_products, products_to_document


class InMemoryCatalogStore(CatalogStore):
    """
    Keeps the serialized catalog document in memory.

    Replacing swaps a single reference to a freshly built document,
    so a reader never sees a half-written catalog.
    """

    def __init__(self):
        self._document: Optional[Dict[str, Any]] = None
        self.writes = 0

    def replace_catalog(self, products: List[CatalogProduct]) -> None:
        document = products_to_document(products)
        self._document = document
        self.writes += 1

    def read_catalog(self) -> List[CatalogProduct]:
        if self._document is None:
            return []
        return document_to_products(copy.deepcopy(self._document))

    def delete_catalog(self) -> None:
        self._document = None
        self.writes += 1
