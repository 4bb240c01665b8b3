"""
Season links — basketball-reference pages for a team's roster and schedule.

Plain string construction, no lookup. The year is used exactly as it
appeared in the request path.

Called by: routers/seasons.py
"""

BASKETBALL_REFERENCE_TEAMS = "https://www.basketball-reference.com/teams/"

MAX_YEAR = 2**63 - 1
MAX_YEAR_DIGITS = len(str(MAX_YEAR))


def roster_url(team: str, year: str) -> str:
    return BASKETBALL_REFERENCE_TEAMS + team + "/" + year + ".html"


def schedule_url(team: str, year: str) -> str:
    return BASKETBALL_REFERENCE_TEAMS + team + "/" + year + "_games.html"


def parse_year(raw: str) -> int | None:
    """Return the year as an int, or None if it isn't a run of ASCII digits
    that fits in a signed 64-bit integer (the widest int BSON stores)."""
    if not raw or not raw.isascii() or not raw.isdigit():
        return None
    digits = raw.lstrip("0") or "0"
    if len(digits) > MAX_YEAR_DIGITS:
        return None
    year = int(digits)
    if year > MAX_YEAR:
        return None
    return year
