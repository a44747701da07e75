"""Shared fixtures for roombook tests.

The persistence collaborator is replaced by ``FakeDatabase`` so that the
validator and services can be tested without a running MongoDB.
"""

import os

os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("LOG_JSON", "false")

import pytest  # noqa: E402

from roombook.services.validator import Validator  # noqa: E402


class FakeCollection:
    def __init__(self, documents: list[dict]):
        self.documents = documents
        self.filters: list[dict] = []

    async def count_documents(self, filter: dict, **kwargs) -> int:
        self.filters.append(filter)
        return sum(
            1
            for document in self.documents
            if all(document.get(key) == value for key, value in filter.items())
        )


class FakeDatabase:
    """Stand-in for ``AsyncDatabase`` keyed by collection name."""

    def __init__(self, collections: dict[str, list[dict]] | None = None):
        self.collections = {
            name: FakeCollection(documents)
            for name, documents in (collections or {}).items()
        }

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection([]))


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase(
        {
            "rooms": [
                {"name": "Seminarraum", "room_nr": "A101"},
                {"name": "Labor", "room_nr": "B204"},
            ],
            "users": [{"username": "admin"}],
        }
    )


@pytest.fixture
def validator(database: FakeDatabase) -> Validator:
    return Validator(database)  # type: ignore[arg-type]
