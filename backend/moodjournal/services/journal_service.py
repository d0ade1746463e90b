# journal service: save policy for mood entries
# validates the note, applies the exact-one-mood rule, then writes to the store

import logging
from datetime import date, datetime, timezone
from typing import Optional, Union

from moodjournal.exceptions import ValidationError
from moodjournal.services.mood_classifier import detect_moods, resolve_sentiment
from moodjournal.services.mood_store import MoodStore

logger = logging.getLogger(__name__)

EMPTY_NOTE_MESSAGE = "Please write something before saving your mood."
AMBIGUOUS_MOOD_MESSAGE = "Please describe only one main mood at a time."
SAVED_MESSAGE = "Mood saved!"


def to_day_string(value: Union[datetime, date]) -> str:
    """YYYY-MM-DD of the utc day. naive datetimes are taken as utc."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    return value.isoformat()


def check_note(note: Optional[str]) -> str:
    """run the save-time checks and return the resolved sentiment.
    raises ValidationError for an empty or ambiguous note."""
    if not note or not note.strip():
        raise ValidationError(EMPTY_NOTE_MESSAGE, reason="empty note")

    detected = detect_moods(note)
    sentiment = resolve_sentiment(detected)
    if sentiment is None:
        message = f"{AMBIGUOUS_MOOD_MESSAGE}\nDetected moods: {', '.join(detected)}"
        raise ValidationError(message, reason="ambiguous mood", detected_moods=detected)
    return sentiment


async def save_entry(
    store: MoodStore,
    note: Optional[str],
    selected_date: Union[datetime, date],
    owner_id: str,
) -> dict:
    """validate and persist one journal entry. returns the stored record.
    nothing reaches the store when validation fails."""
    try:
        sentiment = check_note(note)
    except ValidationError as e:
        logger.info(f"Mood save rejected for {owner_id}: {e.reason}")
        raise

    record = {
        "dt": to_day_string(selected_date),
        "note": note,
        "sentiment": sentiment,
        "user_id": owner_id,
    }
    record_id = await store.insert(record)
    logger.info(f"Mood saved: {record_id} ({sentiment}) by {owner_id}")
    return {"id": record_id, **record}
