"""
schemas/seasons.py — Team season documents and derived link payloads

Stat figures are opaque text written by the ingestion job; they are
passed through untouched. Documents may carry fields not listed here,
and those are kept so the response mirrors what is stored. Older documents
hold the roster and schedule as page URLs instead of structured data.

Called by: routers/seasons.py
Depends on: pydantic
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_PASSTHROUGH = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)


# ── Stored documents ────────────────────────────────────────────────────


class PlayerSplit(BaseModel):
    model_config = _PASSTHROUGH

    g: str | None = Field(None, alias="G")
    per: str | None = Field(None, alias="PER")
    ts_pct: str | None = Field(None, alias="TS%")
    ws: str | None = Field(None, alias="WS")


class PlayerStatLine(BaseModel):
    model_config = _PASSTHROUGH

    name: str | None = None
    regular_season: PlayerSplit | None = None
    playoffs: PlayerSplit | None = None


class TeamSeason(BaseModel):
    model_config = _PASSTHROUGH

    team: str
    year: int
    full_name: str | None = None
    roster_url: str | None = None
    roster: list[PlayerStatLine] | str | None = None
    schedule_url: str | None = None
    schedule: dict[str, Any] | str | None = None


# ── Derived links ───────────────────────────────────────────────────────


class SeasonLink(BaseModel):
    team: str
    year: int
    url: str


class RosterLink(SeasonLink):
    pass


class ScheduleLink(SeasonLink):
    pass
