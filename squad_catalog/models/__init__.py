"""
Data models for the catalog and squads.

This module contains pure data classes with no business logic.
"""

from .product import CatalogProduct, CatalogVariant, ImportSummary, new_id
from .squad import Participant, SelectedVariant, SquadItem

__all__ = [
    'CatalogProduct',
    'CatalogVariant',
    'ImportSummary',
    'new_id',
    'Participant',
    'SelectedVariant',
    'SquadItem',
]
