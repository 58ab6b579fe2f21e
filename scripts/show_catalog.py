#!/usr/bin/env python3
"""
Show the stored product catalog.

Prints one line per product: title, handle, type, vendor, base price
and number of variants.

Usage:
    python3 scripts/show_catalog.py
    python3 scripts/show_catalog.py --backend firestore
"""

import argparse
import os
import sys

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from squad_catalog.catalog import PersistenceError
from squad_catalog.common.log_config import setup_logging
from squad_catalog.squad import format_currency
from squad_catalog.storage import create_store


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(description="List products in the squad catalog")
    parser.add_argument(
        "--backend",
        choices=["json", "firestore"],
        default=None,
        help="Storage backend (default: from config/settings.yaml)"
    )
    parser.add_argument(
        "--store-path",
        default=None,
        help="Catalog JSON file for the json backend"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (debug) logging")
    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        store = create_store(backend=args.backend, json_path=args.store_path)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    try:
        products = store.read_catalog()
    except PersistenceError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not products:
        print("No products in catalog")
        return

    print(f"{'Product':<40} {'Category':<20} {'Brand':<20} {'Price':>10} {'Variants':>8}")
    print("-" * 102)
    for product in products:
        print(f"{product.title[:40]:<40} {product.product_type[:20]:<20} "
              f"{product.vendor[:20]:<20} {format_currency(product.base_price):>10} "
              f"{len(product.variants):>8}")
        print(f"  {product.handle}")

    print(f"\n{len(products)} products, {sum(len(p.variants) for p in products)} variants")


if __name__ == "__main__":
    main()
