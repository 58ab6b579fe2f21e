"""
JSON file catalog store.

The catalog document is written to a temporary file next to the target
and renamed over it, so the file on disk is always a complete catalog.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List

from ..catalog.errors import PersistenceError
from ..models import CatalogProduct
from .base import CatalogStore, document_to_products, products_to_document

logger = logging.getLogger(__name__)


class JsonFileCatalogStore(CatalogStore):
    """
    Stores the catalog as {"products": [...]} in one JSON file.

    Usage:
        store = JsonFileCatalogStore("data/catalog.json")
        store.replace_catalog(products)
        products = store.read_catalog()
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def replace_catalog(self, products: List[CatalogProduct]) -> None:
        document = products_to_document(products)
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix='.tmp', dir=self.path.parent
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise PersistenceError(f"Could not write {self.path}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.debug("Wrote %d products to %s", len(products), self.path)

    def read_catalog(self) -> List[CatalogProduct]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Could not read {self.path}: {e}") from e
        if not isinstance(document, dict):
            raise PersistenceError(f"Unexpected catalog format in {self.path}")
        return document_to_products(document)

    def delete_catalog(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Could not delete {self.path}: {e}") from e
        logger.debug("Deleted %s", self.path)
