"""Squad shopping list helpers."""

from .cost_split import (
    ParticipantShare,
    cost_shares,
    format_currency,
    participant_total,
    total_amount,
)

__all__ = [
    'ParticipantShare',
    'cost_shares',
    'format_currency',
    'participant_total',
    'total_amount',
]
