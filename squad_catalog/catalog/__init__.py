"""
Catalog import and browsing.

Modules:
    importer  - CSV export -> normalized catalog -> catalog store
    selection - Size/colour choices and squad item creation
    errors    - Import error taxonomy
"""

from .errors import CatalogImportError, ErrorKind, PersistenceError
from .importer import CatalogImporter, infer_size_and_color, parse_price, parse_quantity
from .selection import (
    available_colors,
    available_sizes,
    find_variant,
    selected_price,
    to_squad_item,
)

__all__ = [
    # Import
    'CatalogImporter',
    'infer_size_and_color',
    'parse_price',
    'parse_quantity',
    # Errors
    'CatalogImportError',
    'ErrorKind',
    'PersistenceError',
    # Selection
    'available_colors',
    'available_sizes',
    'find_variant',
    'selected_price',
    'to_squad_item',
]
