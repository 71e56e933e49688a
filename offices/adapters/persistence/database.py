"""MongoDB client setup."""

from __future__ import annotations

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from offices.config import Settings


def create_client(settings: Settings) -> AsyncMongoClient:
    """Create the process-wide Mongo client. UUIDs use the standard BSON subtype."""
    return AsyncMongoClient(settings.mongo_url, uuidRepresentation="standard")


def get_offices_collection(client: AsyncMongoClient, settings: Settings) -> AsyncCollection:
    return client[settings.mongo_database][settings.offices_collection]
