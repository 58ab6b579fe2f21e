"""
Cloud Firestore catalog store

REST client for the Firestore documents API and the catalog store on top
of it. The whole catalog is one document (catalog/products), so a single
PATCH replaces it atomically.
"""

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from ..catalog.errors import PersistenceError
from ..common.constants import CATALOG_COLLECTION, CATALOG_DOCUMENT
from ..models import CatalogProduct
from .base import CatalogStore, document_to_products, products_to_document

logger = logging.getLogger(__name__)


class FirestoreError(PersistenceError):
    """Firestore request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Typed value encoding
# ---------------------------------------------------------------------------

def encode_value(value: Any) -> Dict[str, Any]:
    """
    Convert a Python value to Firestore typed JSON.

    Example:
        encode_value(["S", 2]) ->
        {'arrayValue': {'values': [{'stringValue': 'S'}, {'integerValue': '2'}]}}
    """
    if value is None:
        return {'nullValue': None}
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return {'booleanValue': value}
    if isinstance(value, int):
        return {'integerValue': str(value)}
    if isinstance(value, float):
        return {'doubleValue': value}
    if isinstance(value, str):
        return {'stringValue': value}
    if isinstance(value, (list, tuple)):
        values = [encode_value(v) for v in value]
        return {'arrayValue': {'values': values} if values else {}}
    if isinstance(value, dict):
        return {'mapValue': {'fields': encode_fields(value)}}
    raise TypeError(f"Unsupported Firestore value type: {type(value).__name__}")


def encode_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: encode_value(value) for key, value in data.items()}


def decode_value(value: Dict[str, Any]) -> Any:
    """Convert Firestore typed JSON back to a Python value."""
    if 'nullValue' in value:
        return None
    if 'booleanValue' in value:
        return bool(value['booleanValue'])
    if 'integerValue' in value:
        return int(value['integerValue'])
    if 'doubleValue' in value:
        return float(value['doubleValue'])
    if 'stringValue' in value:
        return value['stringValue']
    if 'timestampValue' in value:
        return value['timestampValue']
    if 'arrayValue' in value:
        return [decode_value(v) for v in value['arrayValue'].get('values', [])]
    if 'mapValue' in value:
        return decode_fields(value['mapValue'].get('fields', {}))
    raise ValueError(f"Unsupported Firestore value: {list(value)}")


def decode_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {key: decode_value(value) for key, value in fields.items()}


# ---------------------------------------------------------------------------
# REST client
# ---------------------------------------------------------------------------

class FirestoreClient:
    """
    Minimal client for the Firestore REST documents API.

    Handles:
    - Authentication (API key and/or Firebase ID token)
    - Retries on rate limiting and server errors
    - Error mapping to FirestoreError

    Usage:
        client = FirestoreClient(project_id="my-app", api_key="AIza...")
        doc = client.get_document("catalog/products")
        client.write_document("catalog/products", {"products": []})
    """

    BASE_URL = "https://firestore.googleapis.com/v1"
    MAX_RETRIES = 5
    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(
        self,
        project_id: str,
        api_key: Optional[str] = None,
        id_token: Optional[str] = None,
        database: str = "(default)",
        timeout: int = 30,
    ):
        """
        Initialize the client.

        Args:
            project_id: Google Cloud / Firebase project id
            api_key: Web API key sent as the "key" query parameter
            id_token: Firebase ID token sent as a bearer token
            database: Firestore database id
            timeout: Request timeout in seconds
        """
        if not project_id:
            raise ValueError("Firestore project_id is required")

        self.project_id = project_id
        self.database = database
        self.timeout = timeout
        self.documents_url = (
            f"{self.BASE_URL}/projects/{project_id}/databases/{database}/documents"
        )

        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        if id_token:
            self.session.headers["Authorization"] = f"Bearer {id_token}"
        self.params = {"key": api_key} if api_key else {}

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    @staticmethod
    def _retry_after(response, attempt: int) -> int:
        """Seconds to wait: Retry-After when it is a number, else exponential backoff."""
        try:
            return int(response.headers.get("Retry-After", 2 ** attempt))
        except (TypeError, ValueError):
            return 2 ** attempt

    def request(self, method: str, path: str, data: Optional[Dict] = None) -> Optional[Dict]:
        """
        Make a documents API request with retries.

        Args:
            method: HTTP method (GET, PATCH)
            path: Document path relative to the documents root (e.g. "catalog/products")
            data: Request body for PATCH

        Returns:
            Response JSON, or None when a GET finds no document (404)

        Raises:
            FirestoreError: On any other HTTP error, timeout or transport failure
        """
        url = f"{self.documents_url}/{path}"

        for attempt in range(self.MAX_RETRIES):
            try:
                if method == "GET":
                    response = self.session.get(url, params=self.params, timeout=self.timeout)
                elif method == "PATCH":
                    response = self.session.patch(url, params=self.params, json=data, timeout=self.timeout)
                else:
                    raise ValueError(f"Unsupported method: {method}")
            except requests.exceptions.Timeout as e:
                logger.error("Firestore request timeout: %s %s", method, path)
                raise FirestoreError(f"Timeout on {method} {path}") from e
            except requests.exceptions.RequestException as e:
                logger.error("Firestore request failed: %s", e)
                raise FirestoreError(f"{method} {path} failed: {e}") from e

            # Retry on rate limiting or server errors
            if response.status_code in self.RETRYABLE_STATUS_CODES:
                retry_after = self._retry_after(response, attempt)
                logger.warning("HTTP %d on %s, retry %d/%d in %ds...",
                               response.status_code, path, attempt + 1,
                               self.MAX_RETRIES, retry_after)
                if attempt + 1 < self.MAX_RETRIES:
                    time.sleep(retry_after)
                continue

            # A missing document is only meaningful for reads
            if response.status_code == 404 and method == "GET":
                return None

            if response.status_code >= 400:
                error_msg = response.text[:200]
                logger.error("Firestore error %d: %s", response.status_code, error_msg)
                raise FirestoreError(
                    f"HTTP {response.status_code} on {method} {path}: {error_msg}",
                    status_code=response.status_code,
                )

            if not response.content:
                return {}
            return response.json()

        logger.error("Max retries (%d) exceeded for %s %s", self.MAX_RETRIES, method, path)
        raise FirestoreError(f"Max retries exceeded for {method} {path}")

    def get_document(self, path: str) -> Optional[Dict[str, Any]]:
        """Read a document as plain Python data, None if it doesn't exist."""
        result = self.request("GET", path)
        if result is None:
            return None
        try:
            return decode_fields(result.get("fields", {}))
        except ValueError as e:
            raise FirestoreError(f"Unreadable document {path}: {e}") from e

    def write_document(self, path: str, data: Dict[str, Any]) -> None:
        """Create or fully overwrite a document (no update mask)."""
        self.request("PATCH", path, {"fields": encode_fields(data)})


class FirestoreCatalogStore(CatalogStore):
    """
    Catalog stored as the single Firestore document catalog/products.

    Usage:
        with FirestoreClient(project_id="my-app", api_key="AIza...") as client:
            store = FirestoreCatalogStore(client)
            store.replace_catalog(products)
    """

    def __init__(self, client: FirestoreClient):
        self.client = client
        self.document_path = f"{CATALOG_COLLECTION}/{CATALOG_DOCUMENT}"

    def replace_catalog(self, products: List[CatalogProduct]) -> None:
        self.client.write_document(self.document_path, products_to_document(products))
        logger.debug("Wrote %d products to %s", len(products), self.document_path)

    def read_catalog(self) -> List[CatalogProduct]:
        document = self.client.get_document(self.document_path)
        if document is None:
            return []
        return document_to_products(document)

    def delete_catalog(self) -> None:
        # The document stays, with an empty product list
        self.client.write_document(self.document_path, {"products": []})
