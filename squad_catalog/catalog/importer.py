"""
Catalog Importer

Turns a Shopify-style product export (one row per variant) into the
normalized catalog and replaces the stored catalog with it.

Import stages:
1. Parse the CSV bytes into rows (whole file, before anything else runs)
2. Grouping: one product shell per handle, metadata from its first row
3. Enrichment: images, variants, size/colour and the running minimum price
4. Finalization: products without variants get a base price of 0
5. Persistence: one replace-all write through the catalog store
"""

import csv
import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from ..common import constants as col
from ..common.csv_utils import parse_csv_bytes
from ..common.text_utils import split_tags
from ..models import CatalogProduct, CatalogVariant, ImportSummary, new_id
from .errors import CatalogImportError, ErrorKind, PersistenceError

logger = logging.getLogger(__name__)

# Leading integer, the way spreadsheet exports write stock counts ("12", "12.0")
_INT_PREFIX = re.compile(r'^\s*([+-]?\d+)')

# Leading decimal number of a price cell ("20.00 USD" -> 20.00, "12,50" -> 12)
_FLOAT_PREFIX = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_price(value: Optional[str]) -> float:
    """
    Parse a price cell.

    Only the leading number counts, so trailing currency codes or
    thousands separators end the number.

    Returns:
        The price, or 0 for blank, non-numeric or non-finite values
    """
    if not value:
        return 0.0
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return 0.0
    price = float(match.group(1))
    if not math.isfinite(price):
        return 0.0
    return price


def parse_quantity(value: Optional[str]) -> int:
    """
    Parse an inventory cell.

    Returns:
        Leading integer of the cell, never below 0; 0 when unparsable
    """
    if not value:
        return 0
    match = _INT_PREFIX.match(value)
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def infer_size_and_color(variant: CatalogVariant) -> None:
    """
    Set variant.size / variant.color from its option names.

    Slots are scanned in order and a later matching slot overwrites an
    earlier one of the same kind.
    """
    for name, value in variant.options():
        if not name or not value:
            continue
        name_lower = name.lower()
        if any(keyword in name_lower for keyword in col.SIZE_KEYWORDS):
            variant.size = value
        elif any(keyword in name_lower for keyword in col.COLOR_KEYWORDS):
            variant.color = value


@dataclass
class _ProductBuilder:
    """Product under construction plus its running minimum price."""
    product: CatalogProduct
    min_price: Optional[float] = None

    def add_variant(self, variant: CatalogVariant) -> None:
        self.product.variants.append(variant)
        if self.min_price is None or variant.price < self.min_price:
            self.min_price = variant.price

    def finalize(self) -> CatalogProduct:
        self.product.base_price = self.min_price if self.min_price is not None else 0
        return self.product


class CatalogImporter:
    """
    Imports a product CSV export into a catalog store.

    The importer keeps no state between calls; every import rebuilds the
    whole catalog and replaces the stored one.

    Usage:
        importer = CatalogImporter(JsonFileCatalogStore("data/catalog.json"))
        summary = importer.import_catalog(csv_bytes)
        print(summary.product_count, summary.variant_count)
    """

    def __init__(self, store):
        """
        Initialize the importer.

        Args:
            store: CatalogStore that receives the finished catalog
        """
        self.store = store

    def parse_rows(self, raw: bytes) -> List[Dict[str, str]]:
        """
        Parse raw CSV bytes into rows.

        Raises:
            CatalogImportError: PARSE_FAILURE on encoding or quoting errors
        """
        try:
            return parse_csv_bytes(raw)
        except UnicodeDecodeError as e:
            logger.error("CSV is not valid UTF-8: %s", e)
            raise CatalogImportError(ErrorKind.PARSE_FAILURE, 'invalid UTF-8', e) from e
        except csv.Error as e:
            logger.error("CSV parsing error: %s", e)
            raise CatalogImportError(ErrorKind.PARSE_FAILURE, str(e), e) from e

    def _group_products(self, rows: List[Dict[str, str]]) -> Dict[str, _ProductBuilder]:
        """Create one product shell per handle from the first row that names it."""
        builders: Dict[str, _ProductBuilder] = {}

        for line, row in enumerate(rows, start=2):
            handle = row.get(col.COL_HANDLE) or ''
            title = row.get(col.COL_TITLE) or ''
            if not handle or not title:
                logger.debug("Line %d: no handle or title, not a product row", line)
                continue

            if handle in builders:
                continue

            builders[handle] = _ProductBuilder(CatalogProduct(
                handle=handle,
                title=title,
                body=row.get(col.COL_BODY) or '',
                vendor=row.get(col.COL_VENDOR) or '',
                product_type=row.get(col.COL_PRODUCT_TYPE) or '',
                tags=split_tags(row.get(col.COL_TAGS) or ''),
                published=row.get(col.COL_PUBLISHED) == 'true',
            ))

        return builders

    def _build_variant(self, row: Dict[str, str], price: float, image_src: Optional[str]) -> CatalogVariant:
        """Build a variant from one row with an already-validated price."""
        sku = row.get(col.COL_VARIANT_SKU) or ''
        variant = CatalogVariant(
            id=sku or new_id(),
            sku=sku,
            price=price,
            option1_name=row.get(col.COL_OPTION1_NAME) or '',
            option1_value=row.get(col.COL_OPTION1_VALUE) or '',
            option2_name=row.get(col.COL_OPTION2_NAME) or '',
            option2_value=row.get(col.COL_OPTION2_VALUE) or '',
            option3_name=row.get(col.COL_OPTION3_NAME) or None,
            option3_value=row.get(col.COL_OPTION3_VALUE) or None,
            inventory_quantity=parse_quantity(row.get(col.COL_VARIANT_INVENTORY_QTY)),
            image_src=image_src,
        )
        infer_size_and_color(variant)
        return variant

    def _attach_variants(self, rows: List[Dict[str, str]], builders: Dict[str, _ProductBuilder]) -> None:
        """Attach images and variants of every row to its product shell."""
        for line, row in enumerate(rows, start=2):
            handle = row.get(col.COL_HANDLE) or ''
            builder = builders.get(handle) if handle else None
            if builder is None:
                continue

            product = builder.product
            image_src = (row.get(col.COL_IMAGE_SRC) or '').strip() or None
            if image_src and image_src not in product.images:
                product.images.append(image_src)

            price = parse_price(row.get(col.COL_VARIANT_PRICE))
            if price <= 0:
                logger.debug("Line %d (%s): price %r, no variant", line, handle,
                             row.get(col.COL_VARIANT_PRICE))
                continue

            variant = self._build_variant(row, price, image_src)
            if not variant.has_option_value():
                logger.debug("Line %d (%s): no option values, no variant", line, handle)
                continue

            builder.add_variant(variant)

    def build_catalog(self, rows: List[Dict[str, str]]) -> List[CatalogProduct]:
        """
        Normalize parsed rows into catalog products.

        Args:
            rows: Parsed CSV rows in file order

        Returns:
            Products in order of first appearance of their handle
        """
        builders = self._group_products(rows)
        self._attach_variants(rows, builders)
        return [builder.finalize() for builder in builders.values()]

    def import_catalog(self, raw: bytes) -> ImportSummary:
        """
        Import a CSV export and replace the stored catalog.

        Args:
            raw: CSV file contents

        Returns:
            ImportSummary with product and variant counts

        Raises:
            CatalogImportError: PARSE_FAILURE or PERSISTENCE_FAILURE
        """
        rows = self.parse_rows(raw)
        products = self.build_catalog(rows)

        try:
            self.store.replace_catalog(products)
        except PersistenceError as e:
            logger.error("Catalog write failed: %s", e)
            raise CatalogImportError(ErrorKind.PERSISTENCE_FAILURE, str(e), e) from e

        summary = ImportSummary(
            product_count=len(products),
            variant_count=sum(len(p.variants) for p in products),
        )
        logger.info("Imported %d products with %d variants from %d rows",
                    summary.product_count, summary.variant_count, len(rows))
        return summary

    def import_catalog_file(self, path: str | Path) -> ImportSummary:
        """
        Import a CSV export from disk.

        Raises:
            FileNotFoundError: If the file doesn't exist
            CatalogImportError: PARSE_FAILURE or PERSISTENCE_FAILURE
        """
        logger.info("Importing catalog from %s", path)
        return self.import_catalog(Path(path).read_bytes())
