"""
Tests for view converters: relative times and prices.
"""

from datetime import timedelta
from decimal import InvalidOperation

import pytest

from pennypress.catalog.converters import format_time_ago, price_to_number


class TestFormatTimeAgo:
    """Relative time strings for comments."""

    @pytest.mark.parametrize("elapsed, expected", [
        (timedelta(seconds=0), "0 minutes ago"),
        (timedelta(seconds=59), "0 minutes ago"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=59), "59 minutes ago"),
        (timedelta(minutes=60), "1 hour ago"),
        (timedelta(minutes=61), "1 hour ago"),
        (timedelta(hours=23, minutes=59), "23 hours ago"),
        (timedelta(hours=24), "1 day ago"),
        (timedelta(hours=25), "1 day ago"),
        (timedelta(days=2, hours=23), "2 days ago"),
        (timedelta(days=400), "400 days ago"),
    ])
    def test_boundaries(self, elapsed, expected):
        assert format_time_ago(elapsed) == expected

    def test_future_timestamp_clamps_to_zero(self):
        assert format_time_ago(timedelta(minutes=-5)) == "0 minutes ago"


class TestPriceToNumber:
    """Decimal price strings become JSON numbers."""

    def test_trailing_zero(self):
        assert price_to_number("0.10") == 0.1

    def test_whole_number(self):
        assert price_to_number("2.00") == 2.0

    def test_invalid_price_raises(self):
        with pytest.raises(InvalidOperation):
            price_to_number("free")
