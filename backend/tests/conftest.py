# shared fixtures for backend api tests
# provides mock db, mood store, session registry, and httpx test client

import pytest
import pytest_asyncio
from unittest.mock import MagicMock
from bson import ObjectId
from pymongo.errors import PyMongoError

from httpx import AsyncClient, ASGITransport

from moodjournal.main import app
from moodjournal.services.db import get_db
from moodjournal.services.mood_store import MoodStore
from moodjournal.services.session import SessionRegistry, get_sessions


# test ids

CONTRACT_NUMBER = "RE-71904/24"
OTHER_CONTRACT_NUMBER = "RE-12345/23"
PASSWORD = "abcdef"


# sample data (as it would come back from mongodb)

SAMPLE_MOOD = {
    "_id": ObjectId(),
    "dt": "2025-06-10",
    "note": "Feeling pretty anxious about the exam tomorrow.",
    "sentiment": "anxious",
    "user_id": CONTRACT_NUMBER,
}

SAMPLE_MOOD_2 = {
    "_id": ObjectId(),
    "dt": "2025-06-13",
    "note": "Spent the day at the beach, totally relaxed.",
    "sentiment": "calm",
    "user_id": OTHER_CONTRACT_NUMBER,
}

SAMPLE_MOOD_3 = {
    "_id": ObjectId(),
    "dt": "2025-06-11",
    "note": "Nothing worth mentioning.",
    "sentiment": "neutral",
    "user_id": CONTRACT_NUMBER,
}


# async cursor mock

class AsyncCursorMock:
    """mock for motor's async cursor, supports async for and chained methods"""

    def __init__(self, data=None):
        self._data = data or []
        self._index = 0

    def sort(self, key, direction=1):
        self._data = sorted(self._data, key=lambda d: d.get(key, ""), reverse=direction == -1)
        return self

    def __aiter__(self):
        self._index = 0
        return self

    async def __anext__(self):
        if self._index >= len(self._data):
            raise StopAsyncIteration
        item = self._data[self._index]
        self._index += 1
        return item


class MockCollection:
    """mock for a motor collection with async methods"""

    def __init__(self, data=None):
        self._data = data or []
        self.inserted = []
        self.find_calls = 0

    def find(self, query=None, projection=None):
        self.find_calls += 1
        results = self._data
        if query:
            results = [d for d in results if self._matches(d, query)]
        return AsyncCursorMock(list(results))

    async def find_one(self, query=None, projection=None):
        if not query:
            return self._data[0] if self._data else None
        for doc in self._data:
            if self._matches(doc, query):
                return doc
        return None

    async def insert_one(self, doc):
        oid = doc.get("_id", ObjectId())
        doc["_id"] = oid
        self._data.append(doc)
        self.inserted.append(doc)
        result = MagicMock()
        result.inserted_id = oid
        return result

    async def create_index(self, *args, **kwargs):
        return "mock_index"

    def _matches(self, doc, query):
        """basic mongodb equality matching for tests"""
        return all(doc.get(key) == value for key, value in query.items())


class FailingCursor(AsyncCursorMock):
    """cursor whose iteration fails like a dropped connection"""

    def __init__(self, message):
        super().__init__([])
        self._message = message

    async def __anext__(self):
        raise PyMongoError(self._message)


class FailingCollection(MockCollection):
    """collection where every read and write fails with the given message"""

    def __init__(self, message="connection refused", data=None):
        super().__init__(data)
        self.message = message

    def find(self, query=None, projection=None):
        self.find_calls += 1
        return FailingCursor(self.message)

    async def insert_one(self, doc):
        raise PyMongoError(self.message)


class MockDatabase:
    """mock database that mimics the Database class"""

    def __init__(self):
        self.moods = MockCollection([
            SAMPLE_MOOD.copy(),
            SAMPLE_MOOD_2.copy(),
            SAMPLE_MOOD_3.copy(),
        ])

    async def connect(self):
        pass

    async def close(self):
        pass


@pytest.fixture
def mock_db():
    """create a fresh mock database for each test"""
    return MockDatabase()


@pytest.fixture
def store(mock_db):
    """mood store over the mock database"""
    return MoodStore(mock_db)


@pytest.fixture
def registry():
    """fresh session registry per test"""
    return SessionRegistry()


@pytest_asyncio.fixture
async def client(mock_db, registry):
    """httpx async test client with mocked dependencies, not logged in"""

    async def override_get_db():
        return mock_db

    async def override_get_sessions():
        return registry

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_sessions] = override_get_sessions

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def user_client(mock_db, registry):
    """client logged in as CONTRACT_NUMBER"""

    async def override_get_db():
        return mock_db

    async def override_get_sessions():
        return registry

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_sessions] = override_get_sessions

    registry.login(CONTRACT_NUMBER, PASSWORD)

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-Contract-Number": CONTRACT_NUMBER},
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
