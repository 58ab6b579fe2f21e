"""Shared test fixtures."""

import csv
import io
from pathlib import Path

import pytest

from squad_catalog.catalog import CatalogImporter
from squad_catalog.common.constants import CATALOG_COLUMNS
from squad_catalog.models import CatalogProduct, CatalogVariant
from squad_catalog.storage import InMemoryCatalogStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_csv(rows, fieldnames=None) -> bytes:
    """Build CSV bytes from row dicts; unspecified columns are blank."""
    if fieldnames is None:
        fieldnames = CATALOG_COLUMNS
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=fieldnames, restval='')
    writer.writeheader()
    writer.writerows(rows)
    return buf.getvalue().encode('utf-8')


@pytest.fixture
def csv_bytes():
    """Factory turning row dicts into CSV bytes."""
    return make_csv


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_catalog_path():
    """Path of the sample product export."""
    return FIXTURES_DIR / "sample_catalog.csv"


@pytest.fixture
def store():
    return InMemoryCatalogStore()


@pytest.fixture
def importer(store):
    return CatalogImporter(store)


@pytest.fixture
def tee_shirt_rows():
    """Two size variants of one product."""
    return [
        {
            'Handle': 'tee-shirt', 'Title': 'Classic Tee', 'Vendor': 'Acme',
            'Product Type': 'Shirts', 'Tags': 'cotton, summer', 'Published': 'true',
            'Image Src': 'https://cdn.example.com/tee.jpg', 'Variant SKU': 'TEE-S',
            'Option1 Name': 'Size', 'Option1 Value': 'S', 'Variant Price': '20.00',
            'Variant Inventory Qty': '5',
        },
        {
            'Handle': 'tee-shirt', 'Title': 'Classic Tee', 'Variant SKU': 'TEE-L',
            'Option1 Name': 'Size', 'Option1 Value': 'L', 'Variant Price': '22.00',
        },
    ]


@pytest.fixture
def tee_shirt_csv(tee_shirt_rows):
    return make_csv(tee_shirt_rows)


@pytest.fixture
def hoodie_product():
    """Catalog product with size and colour variants."""
    return CatalogProduct(
        id="prod-hoodie",
        handle="hoodie",
        title="Zip Hoodie",
        body="<p>Warm <strong>fleece</strong> hoodie.</p>",
        vendor="Acme",
        product_type="Sweaters",
        tags=["fleece"],
        published=True,
        images=["https://cdn.example.com/hoodie-black.jpg", "https://cdn.example.com/hoodie-red.jpg"],
        variants=[
            CatalogVariant(id="HD-M-BLK", sku="HD-M-BLK", price=45.0,
                           option1_name="Size", option1_value="M",
                           option2_name="Color", option2_value="Black",
                           size="M", color="Black"),
            CatalogVariant(id="HD-L-BLK", sku="HD-L-BLK", price=49.0,
                           option1_name="Size", option1_value="L",
                           option2_name="Color", option2_value="Black",
                           size="L", color="Black"),
            CatalogVariant(id="HD-M-RED", sku="HD-M-RED", price=47.0,
                           option1_name="Size", option1_value="M",
                           option2_name="Color", option2_value="Red",
                           size="M", color="Red",
                           image_src="https://cdn.example.com/hoodie-red.jpg"),
        ],
        base_price=45.0,
    )
