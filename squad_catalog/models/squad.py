"""
Squad data models.

A squad is a group of participants sharing one shopping list.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from ..common.constants import DEFAULT_SELECTION


@dataclass
class Participant:
    """Squad member."""
    id: str
    name: str
    avatar: str = ""


@dataclass
class SelectedVariant:
    """Size and colour picked for a squad item."""
    size: str = DEFAULT_SELECTION
    color: str = DEFAULT_SELECTION


@dataclass
class SquadItem:
    """A catalog product added to the squad list by one participant."""
    id: str
    title: str
    price: float
    added_by: str
    images: List[str] = field(default_factory=list)
    description: str = ""
    vendor: str = ""
    product_type: str = ""
    selected_variant: SelectedVariant = field(default_factory=SelectedVariant)
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
