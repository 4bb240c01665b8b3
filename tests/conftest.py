"""
conftest.py — Shared Test Fixtures for the NBA Data API

Provides an in-memory MongoDB collection (mongomock) seeded with team
seasons, a FastAPI TestClient with the store injected, and a Loguru
sink that captures log records for assertions.

Business Rules:
- All tests run against an isolated in-memory collection (no live MongoDB)
- The app is built with create_app(store=...) so the lifespan never connects
- Each test function gets a fresh collection

Called by: all test files via pytest autodiscovery
Depends on: nbadata.main (create_app), nbadata.database (SeasonStore)
"""

import copy

import mongomock
import pytest
from fastapi.testclient import TestClient
from loguru import logger

from nbadata.database import SeasonStore
from nbadata.logging_config import RequestLogger
from nbadata.main import create_app

LAKERS_2020 = {
    "team": "LAL",
    "full_name": "Los Angeles Lakers",
    "year": 2020,
    "roster_url": "https://www.basketball-reference.com/teams/LAL/2020.html",
    "roster": [
        {
            "name": "LeBron James",
            "regular_season": {"G": "67", "PER": "25.5", "TS%": ".577", "WS": "9.8"},
            "playoffs": {"G": "21", "PER": "28.1", "TS%": ".620", "WS": "4.8"},
        },
        {
            "name": "Anthony Davis",
            "regular_season": {"G": "62", "PER": "27.4", "TS%": ".610", "WS": "11.1"},
            "playoffs": {"G": "21", "PER": "28.9", "TS%": ".665", "WS": "4.9"},
        },
    ],
    "schedule_url": "https://www.basketball-reference.com/teams/LAL/2020_games.html",
    "schedule": {
        "regular_season": [{"date": "Tue, Oct 22, 2019", "opponent": "LAC", "result": "L"}],
        "playoffs": [],
    },
}

CELTICS_2008 = {
    "team": "BOS",
    "full_name": "Boston Celtics",
    "year": 2008,
    "roster_url": "https://www.basketball-reference.com/teams/BOS/2008.html",
    "roster": [],
    "schedule_url": "https://www.basketball-reference.com/teams/BOS/2008_games.html",
    "schedule": {},
}


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture()
def lakers_doc() -> dict:
    return copy.deepcopy(LAKERS_2020)


@pytest.fixture()
def celtics_doc() -> dict:
    return copy.deepcopy(CELTICS_2008)


@pytest.fixture()
def seasons_collection():
    """Fresh in-memory collection seeded with two seasons."""
    collection = mongomock.MongoClient()["nba-data"]["nba_seasons_v2"]
    collection.insert_many([copy.deepcopy(LAKERS_2020), copy.deepcopy(CELTICS_2008)])
    return collection


@pytest.fixture()
def store(seasons_collection) -> SeasonStore:
    return SeasonStore(seasons_collection)


@pytest.fixture()
def log_records():
    """Loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda m: records.append(m.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)


@pytest.fixture()
def app(store):
    return create_app(store=store, request_logger=RequestLogger())


@pytest.fixture()
def client(app) -> TestClient:
    with TestClient(app) as c:
        yield c
