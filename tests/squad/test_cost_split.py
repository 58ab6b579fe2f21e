"""Tests for squad_catalog/squad/cost_split.py"""

import pytest

from squad_catalog.models import Participant, SquadItem
from squad_catalog.squad import (
    cost_shares,
    format_currency,
    participant_total,
    total_amount,
)


@pytest.fixture
def participants():
    return [
        Participant(id="p1", name="Ana"),
        Participant(id="p2", name="Ben"),
        Participant(id="p3", name="Cleo"),
    ]


@pytest.fixture
def items():
    return [
        SquadItem(id="i1", title="Classic Tee", price=20.0, added_by="p1"),
        SquadItem(id="i2", title="Zip Hoodie", price=45.0, added_by="p1"),
        SquadItem(id="i3", title="Canvas Tote", price=15.0, added_by="p2"),
    ]


class TestTotals:
    def test_total_amount(self, items):
        assert total_amount(items) == 80.0

    def test_participant_total(self, items):
        assert participant_total(items, "p1") == 65.0
        assert participant_total(items, "p2") == 15.0

    def test_participant_without_items(self, items):
        assert participant_total(items, "p3") == 0

    def test_empty_list(self):
        assert total_amount([]) == 0


class TestCostShares:
    def test_percentages(self, items, participants):
        shares = cost_shares(items, participants)

        assert [s.participant.id for s in shares] == ["p1", "p2", "p3"]
        assert shares[0].total == 65.0
        assert shares[0].percentage == pytest.approx(81.25)
        assert shares[1].percentage == pytest.approx(18.75)
        assert shares[2].percentage == 0

    def test_percentages_sum_to_100(self, items, participants):
        shares = cost_shares(items, participants)
        assert sum(s.percentage for s in shares) == pytest.approx(100.0)

    def test_empty_list_gives_zero_percentages(self, participants):
        shares = cost_shares([], participants)
        assert all(s.percentage == 0 for s in shares)


class TestFormatCurrency:
    def test_two_decimals(self):
        assert format_currency(20, "€") == "€20.00"

    def test_thousands_separator(self):
        assert format_currency(1234.5, "$") == "$1,234.50"

    def test_negative(self):
        assert format_currency(-3.5, "€") == "-€3.50"

    def test_symbol_from_config(self):
        assert format_currency(1) == "€1.00"
