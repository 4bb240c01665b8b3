"""Database connection and season store.

One MongoClient is created at startup and shared by every request.
pymongo clients are thread-safe and pool their own connections, so the
sync route handlers can use the store concurrently without locking.
"""

from fastapi import Request
from loguru import logger
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import Settings


class StoreError(Exception):
    """A lookup failed inside the driver (network, auth, bad query)."""


class SeasonNotFound(StoreError):
    """No document matches the requested (team, year)."""

    def __init__(self, team: str, year: int):
        super().__init__(f"no season for team={team!r} year={year}")
        self.team = team
        self.year = year


class StoreUnavailable(StoreError):
    """The store could not be reached at startup."""


def connect(settings: Settings) -> MongoClient:
    """Create a client and ping the server so a bad URI fails at startup."""
    client = MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        socketTimeoutMS=settings.mongodb_timeout_ms,
        connectTimeoutMS=settings.mongodb_timeout_ms,
    )
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StoreUnavailable(f"could not connect to MongoDB: {e}") from e
    logger.info("Connected to MongoDB (database={}, collection={})",
                settings.mongodb_database, settings.mongodb_collection)
    return client


class SeasonStore:
    """Read-only access to the team/season collection."""

    def __init__(self, collection: Collection):
        self._collection = collection

    @classmethod
    def from_client(cls, client: MongoClient, settings: Settings) -> "SeasonStore":
        db = client[settings.mongodb_database]
        return cls(db[settings.mongodb_collection])

    def find_team_season(self, team: str, year: int) -> dict:
        try:
            doc = self._collection.find_one({"team": team, "year": year}, {"_id": 0})
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        if doc is None:
            raise SeasonNotFound(team, year)
        return doc


def get_store(request: Request) -> SeasonStore:
    """FastAPI dependency: the store attached to the running app."""
    store = request.app.state.store
    if store is None:
        raise StoreUnavailable("season store is not initialised")
    return store
