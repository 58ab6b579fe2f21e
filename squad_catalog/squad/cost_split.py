"""
Squad cost distribution.

Totals the shared list and splits it by the participant who added each item.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..common.config_loader import get_currency_symbol
from ..models import Participant, SquadItem


@dataclass
class ParticipantShare:
    """One participant's part of the squad total."""
    participant: Participant
    total: float
    percentage: float


def total_amount(items: Iterable[SquadItem]) -> float:
    """Sum of all item prices."""
    return sum(item.price for item in items)


def participant_total(items: Iterable[SquadItem], participant_id: str) -> float:
    """Sum of prices of the items a participant added."""
    return sum(item.price for item in items if item.added_by == participant_id)


def cost_shares(items: List[SquadItem], participants: List[Participant]) -> List[ParticipantShare]:
    """
    Split the squad total across participants.

    Args:
        items: Squad list
        participants: Members, in display order

    Returns:
        One share per participant; percentages are 0 when the list is free or empty
    """
    grand_total = total_amount(items)
    shares = []
    for participant in participants:
        total = participant_total(items, participant.id)
        percentage = (total / grand_total * 100) if grand_total else 0.0
        shares.append(ParticipantShare(participant=participant, total=total, percentage=percentage))
    return shares


def format_currency(amount: float, currency_symbol: Optional[str] = None) -> str:
    """
    Format an amount for display, e.g. "€12.50".

    Args:
        amount: Amount to format
        currency_symbol: Symbol to prefix (if None, loads from config)
    """
    if currency_symbol is None:
        currency_symbol = get_currency_symbol()
    sign = '-' if amount < 0 else ''
    return f"{sign}{currency_symbol}{abs(amount):,.2f}"
