#!/usr/bin/env python3
"""
Delete all products from the squad catalog.

Usage:
    # Delete (with confirmation prompt)
    python3 scripts/delete_catalog.py

    # No prompt
    python3 scripts/delete_catalog.py --backend firestore --yes
"""

import argparse
import os
import sys

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from squad_catalog.catalog import PersistenceError
from squad_catalog.common.log_config import setup_logging
from squad_catalog.storage import create_store


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(description="Delete all products from the squad catalog")
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
    parser.add_argument("--yes", action="store_true", help="Skip confirmation prompt")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (debug) logging")
    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        store = create_store(backend=args.backend, json_path=args.store_path)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        count = len(store.read_catalog())
        print(f"  Total products: {count}")

        if count == 0:
            print("No products to delete.")
            return

        # Confirmation prompt
        if not args.yes:
            print(f"\n*** WARNING: This will permanently delete {count} products ***")
            confirm = input(f"Delete {count} products? Type YES to confirm: ")
            if confirm != "YES":
                print("Aborted.")
                return

        store.delete_catalog()
    except PersistenceError as e:
        print(f"Failed to delete products: {e}")
        sys.exit(1)

    print("All products have been deleted")


if __name__ == "__main__":
    main()
