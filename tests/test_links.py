"""
test_links.py — Tests for nbadata/services/links.py

Called by: pytest
Depends on: nbadata/services/links.py
"""

import pytest

from nbadata.services.links import parse_year, roster_url, schedule_url


@pytest.mark.parametrize("team,year", [("LAL", "2020"), ("BOS", "2008"), ("NJN", "1977")])
def test_urls_exact_form(team, year):
    assert roster_url(team, year) == f"https://www.basketball-reference.com/teams/{team}/{year}.html"
    assert schedule_url(team, year) == f"https://www.basketball-reference.com/teams/{team}/{year}_games.html"


@pytest.mark.parametrize("raw,expected", [
    ("2020", 2020),
    ("1947", 1947),
    ("0", 0),
    ("abc", None),
    ("20.5", None),
    ("-2020", None),
    ("+2020", None),
    (" 2020", None),
    ("2_020", None),
    ("٢٠٢٠", None),  # Arabic-Indic digits
    ("", None),
    ("00002020", 2020),
    ("0" * 5000 + "1999", 1999),
    (str(2**63 - 1), 2**63 - 1),
    (str(2**63), None),
    ("9" * 20, None),
    ("9" * 5000, None),
])
def test_parse_year(raw, expected):
    assert parse_year(raw) == expected
