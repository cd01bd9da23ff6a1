"""Tests for priority color resolution."""

import pytest

from todaywidget.models import PriorityColor
from todaywidget.services.priority import PRIORITY_PALETTE, resolve_priority_color


class TestResolvePriorityColor:
    @pytest.mark.parametrize(
        ("priority", "expected"),
        [
            (1, PriorityColor.URGENT),
            (2, PriorityColor.HIGH),
            (3, PriorityColor.NORMAL),
            (4, PriorityColor.FALLBACK),
        ],
    )
    def test_in_range_priorities_follow_palette_order(self, priority, expected):
        assert resolve_priority_color(priority) is expected

    @pytest.mark.parametrize("priority", [0, -1, -100, 5, 42])
    def test_out_of_range_falls_back(self, priority):
        assert resolve_priority_color(priority) is PriorityColor.FALLBACK

    def test_palette_hex_values(self):
        assert [c.value for c in PRIORITY_PALETTE] == [
            "#FF645E",
            "#FF8F24",
            "#4A8CFC",
            "#525252",
        ]
