#!/usr/bin/env python3
"""
Catalog Import Script

Imports a Shopify-style product export CSV and replaces the stored catalog:
1. Groups rows by Handle into products
2. Attaches variants (priced rows with options) and unique images
3. Infers size/colour from option names and computes base prices
4. Writes the whole catalog in one replace-all write

Usage:
    python3 scripts/import_catalog.py --input exports/products.csv
    python3 scripts/import_catalog.py --input exports/products.csv --backend firestore
    python3 scripts/import_catalog.py --input exports/products.csv --dry-run
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from squad_catalog.catalog import CatalogImporter, CatalogImportError
from squad_catalog.common.log_config import setup_logging
from squad_catalog.storage import InMemoryCatalogStore, create_store

logger = logging.getLogger(__name__)


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Import a product CSV export into the squad catalog"
    )
    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Input CSV file path"
    )
    parser.add_argument(
        "--backend",
        choices=["memory", "json", "firestore"],
        default=None,
        help="Storage backend (default: from config/settings.yaml)"
    )
    parser.add_argument(
        "--store-path",
        default=None,
        help="Catalog JSON file for the json backend"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Normalize and report counts without writing the catalog"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    # Validate input exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}")
        sys.exit(1)

    if args.dry_run:
        store = InMemoryCatalogStore()
    else:
        try:
            store = create_store(backend=args.backend, json_path=args.store_path)
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)

    print("=" * 60)
    print("Catalog Import")
    print("=" * 60)
    print(f"  Input: {args.input}")
    print(f"  Store: {type(store).__name__}{' (dry run)' if args.dry_run else ''}")

    importer = CatalogImporter(store)
    try:
        summary = importer.import_catalog_file(args.input)
    except CatalogImportError as e:
        print(f"\nError: {e}")
        sys.exit(1)

    print(f"\nSuccessfully imported {summary.product_count} products "
          f"with {summary.variant_count} variants")


if __name__ == "__main__":
    main()
