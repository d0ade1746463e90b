# seed script: inserts a few demo mood entries
# entries go through the same save policy as the api
# run once: python -m moodjournal.seed

import asyncio
import logging
from datetime import date

from moodjournal.exceptions import ValidationError
from moodjournal.services.db import db
from moodjournal.services.journal_service import save_entry
from moodjournal.services.mood_store import MoodStore

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

DEMO_CONTRACT_NUMBER = "RE-71904/24"

DEMO_ENTRIES = [
    (date(2025, 6, 1), "Finally finished the project, I feel so proud of myself."),
    (date(2025, 6, 2), "Long week. Completely exhausted after the night shift."),
    (date(2025, 6, 3), "Went for a walk by the lake, felt calm the whole afternoon."),
    (date(2025, 6, 4), "Nothing special happened today."),
]


async def seed():
    """insert demo entries for the demo contract number, skips existing"""
    await db.connect()
    store = MoodStore(db)

    created = 0
    for day, note in DEMO_ENTRIES:
        existing = await db.moods.find_one({"user_id": DEMO_CONTRACT_NUMBER, "dt": day.isoformat()})
        if existing:
            logger.info(f"Entry already exists for {day.isoformat()}, skipping")
            continue
        try:
            saved = await save_entry(store, note, day, DEMO_CONTRACT_NUMBER)
        except ValidationError as e:
            logger.warning(f"Demo entry for {day.isoformat()} rejected: {e.reason}")
            continue
        created += 1
        logger.info(f"Created entry {saved['id']} ({saved['sentiment']}) for {day.isoformat()}")

    # history is always read newest day first
    await db.moods.create_index([("dt", -1)])
    logger.info("Created index on moods collection")

    logger.info(f"Seed complete! ({created} new entries)")
    await db.close()


if __name__ == "__main__":
    asyncio.run(seed())
