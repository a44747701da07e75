from typing import Any, Optional
from beanie import init_beanie
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from roombook.models import Room, User
from roombook.settings import settings


_client: Optional[AsyncMongoClient[Any]] = None


async def connect() -> AsyncDatabase[Any]:
    global _client

    _client = AsyncMongoClient(settings.DATABASE_URL.get_secret_value())
    database = _client[settings.DATABASE_NAME]
    await init_beanie(database=database, document_models=[Room, User])

    return database


async def disconnect() -> None:
    global _client

    if _client is not None:
        await _client.close()
        _client = None


def get_database() -> AsyncDatabase[Any]:
    if _client is None:
        raise RuntimeError("Database is not connected")

    return _client[settings.DATABASE_NAME]
