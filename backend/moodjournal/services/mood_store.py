# record store for mood entries
# thin wrapper over the moods collection; driver errors become StoreError

import logging

from pymongo.errors import PyMongoError

from moodjournal.exceptions import StoreError
from moodjournal.services.db import Database

logger = logging.getLogger(__name__)

MOOD_FIELDS = {"dt": 1, "note": 1, "sentiment": 1, "user_id": 1}


def _doc_to_record(doc: dict) -> dict:
    """mongodb document -> plain record with a string id.
    the collection is shared, so null or missing fields become empty strings."""
    # dt may come back as a date/datetime if another writer stored one
    dt = doc.get("dt") or ""
    if not isinstance(dt, str):
        dt = dt.isoformat()[:10] if hasattr(dt, "isoformat") else str(dt)

    return {
        "id": str(doc.get("_id") or ""),
        "dt": dt,
        "note": doc.get("note") or "",
        "sentiment": doc.get("sentiment") or "",
        "user_id": doc.get("user_id") or "",
    }


class MoodStore:
    """select/insert over the moods collection"""

    def __init__(self, db: Database):
        self.db = db

    async def select(self) -> list[dict]:
        """all mood records, newest day first"""
        try:
            cursor = self.db.moods.find({}, MOOD_FIELDS).sort("dt", -1)
            return [_doc_to_record(doc) async for doc in cursor]
        except PyMongoError as e:
            logger.warning(f"Loading moods failed: {e}")
            raise StoreError(f"Error loading mood history: {e}", store_message=str(e)) from e

    async def insert(self, record: dict) -> str:
        """insert one mood record, returns the new id"""
        try:
            result = await self.db.moods.insert_one(dict(record))
        except PyMongoError as e:
            logger.warning(f"Saving mood failed: {e}")
            raise StoreError(f"Error saving mood: {e}", store_message=str(e)) from e
        return str(result.inserted_id)
