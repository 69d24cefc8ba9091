"""Unit tests for display formatting."""

from amcapital.core.formatting import display_city, format_euro, format_pct, format_years


def test_format_euro():
    assert format_euro(1234567) == "1 234 567 €"
    assert format_euro(-788) == "-788 €"
    assert format_euro(None) == "—"


def test_format_euro_decimals():
    assert format_euro(1234.5, decimals=2) == "1 234.50 €"


def test_format_pct():
    assert format_pct(7.04) == "7.04 %"
    assert format_pct(None) == "—"


def test_format_years():
    assert format_years(6.54) == "6.5 ans"


def test_display_city():
    assert display_city("saint-malo") == "Saint-Malo"
    assert display_city("paris") == "Paris"
