"""
Catalog storage backends.

Modules:
    base      - CatalogStore interface and document (de)serialization
    memory    - In-process store for dry runs and tests
    json_file - Local JSON file with atomic rename
    firestore - Cloud Firestore REST client and store
"""

from typing import Any, Dict, Optional

from ..common.config_loader import get_storage_settings
from .base import CatalogStore, document_to_products, products_to_document
from .firestore import FirestoreCatalogStore, FirestoreClient, FirestoreError
from .json_file import JsonFileCatalogStore
from .memory import InMemoryCatalogStore


def create_store(
    storage_settings: Optional[Dict[str, Any]] = None,
    backend: Optional[str] = None,
    json_path: Optional[str] = None,
) -> CatalogStore:
    """
    Create the catalog store selected in the 'storage' settings section.

    Args:
        storage_settings: Storage section (if None, loads from config and environment)
        backend: Overrides the configured backend name
        json_path: Overrides the configured JSON file path

    Returns:
        Configured CatalogStore

    Raises:
        ValueError: On an unknown backend name or missing Firestore project id
    """
    if storage_settings is None:
        storage_settings = get_storage_settings()

    backend = backend or storage_settings.get('backend', 'json')
    if backend == 'memory':
        return InMemoryCatalogStore()
    if backend == 'json':
        return JsonFileCatalogStore(json_path or storage_settings['json_path'])
    if backend == 'firestore':
        firestore = storage_settings.get('firestore') or {}
        client = FirestoreClient(
            project_id=firestore.get('project_id', ''),
            api_key=firestore.get('api_key'),
            id_token=firestore.get('id_token'),
            database=firestore.get('database', '(default)'),
            timeout=int(firestore.get('timeout', 30)),
        )
        return FirestoreCatalogStore(client)
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = [
    'CatalogStore',
    'create_store',
    'document_to_products',
    'products_to_document',
    'FirestoreCatalogStore',
    'FirestoreClient',
    'FirestoreError',
    'InMemoryCatalogStore',
    'JsonFileCatalogStore',
]
