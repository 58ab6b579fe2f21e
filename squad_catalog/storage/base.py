"""
Catalog store interface.

The catalog is a single document holding every product. Writes replace
the whole document, so readers see either the old or the new catalog.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..catalog.errors import PersistenceError
from ..models import CatalogProduct


def products_to_document(products: List[CatalogProduct]) -> Dict[str, Any]:
    """Serialize products into the stored catalog document."""
    return {'products': [p.to_dict() for p in products]}


def document_to_products(document: Dict[str, Any]) -> List[CatalogProduct]:
    """
    Deserialize the stored catalog document.

    Raises:
        PersistenceError: If the document does not hold a product list
    """
    products = document.get('products', [])
    if not isinstance(products, list):
        raise PersistenceError("Catalog document 'products' is not a list")
    try:
        return [CatalogProduct.from_dict(p) for p in products]
    except (AttributeError, TypeError, ValueError) as e:
        raise PersistenceError(f"Malformed product in catalog document: {e}") from e


class CatalogStore(ABC):
    """Persistence for the product catalog."""

    @abstractmethod
    def replace_catalog(self, products: List[CatalogProduct]) -> None:
        """Overwrite the whole catalog in one write. Raises PersistenceError."""

    @abstractmethod
    def read_catalog(self) -> List[CatalogProduct]:
        """Return all products ([] when nothing is stored). Raises PersistenceError."""

    @abstractmethod
    def delete_catalog(self) -> None:
        """Remove all products. Raises PersistenceError."""
