"""
Squad Catalog

Product catalog tooling for group shopping squads.

Modules:
    models   - Data models (CatalogProduct, CatalogVariant, SquadItem)
    common   - Shared utilities (config loader, CSV parsing, logging)
    catalog  - CSV catalog import and variant selection
    squad    - Cost distribution across squad participants
    storage  - Catalog persistence backends (memory, JSON file, Firestore)
"""
