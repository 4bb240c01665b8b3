"""Team Seasons API — season records and basketball-reference links."""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import ValidationError

from ..database import SeasonNotFound, SeasonStore, StoreError, get_store
from ..schemas.errors import ErrorResponse
from ..schemas.seasons import RosterLink, ScheduleLink, TeamSeason
from ..services.links import parse_year, roster_url, schedule_url

router = APIRouter(prefix="/v1/nba", tags=["seasons"])

INVALID_YEAR = "Invalid year format"

_BAD_YEAR_RESPONSE = {400: {"model": ErrorResponse, "description": INVALID_YEAR}}


def _require_year(year: str) -> int:
    parsed = parse_year(year)
    if parsed is None:
        raise HTTPException(400, INVALID_YEAR)
    return parsed


@router.get(
    "/{team}/{year}",
    response_model=TeamSeason,
    response_model_exclude_unset=True,
    responses={**_BAD_YEAR_RESPONSE, 404: {"model": ErrorResponse}},
)
def get_team_season(team: str, year: str, store: SeasonStore = Depends(get_store)):
    """Full stored record for one team's season."""
    year_num = _require_year(year)
    try:
        doc = store.find_team_season(team, year_num)
        return TeamSeason.model_validate(doc)
    except SeasonNotFound:
        raise HTTPException(404, "Team season not found")
    except (StoreError, ValidationError) as e:
        logger.warning("Season lookup failed for {} {}: {}", team, year_num, e)
        raise HTTPException(404, "Team season lookup failed")


@router.get("/{team}/{year}/roster", response_model=RosterLink, responses=_BAD_YEAR_RESPONSE)
def get_roster_link(team: str, year: str):
    year_num = _require_year(year)
    return RosterLink(team=team, year=year_num, url=roster_url(team, year))


@router.get("/{team}/{year}/schedule", response_model=ScheduleLink, responses=_BAD_YEAR_RESPONSE)
def get_schedule_link(team: str, year: str):
    year_num = _require_year(year)
    return ScheduleLink(team=team, year=year_num, url=schedule_url(team, year))
