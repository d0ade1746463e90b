# moods router: save notes, reload history, classify previews
# saves go through the exact-one-mood policy; store errors are passed through

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from moodjournal.dependencies import get_current_session, get_store
from moodjournal.exceptions import StoreError, ValidationError
from moodjournal.models.mood import (
    DetectRequest,
    DetectResponse,
    MoodCreate,
    MoodItem,
    MoodRejection,
    MoodSaveResponse,
)
from moodjournal.services.mood_classifier import detect_moods, get_sentiment
from moodjournal.services.mood_store import MoodStore
from moodjournal.services.sentiment_colors import SENTIMENT_COLORS
from moodjournal.services.session import JournalSession

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/moods", tags=["moods"])


@router.get("", response_model=list[MoodItem])
async def list_moods(
    session: JournalSession = Depends(get_current_session),
    store: MoodStore = Depends(get_store),
):
    """reload the mood history from the store, newest day first"""
    try:
        records = await session.load_moods(store)
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return [MoodItem.from_record(r) for r in records]


@router.post("", response_model=MoodSaveResponse, status_code=status.HTTP_201_CREATED)
async def save_mood(
    body: MoodCreate,
    session: JournalSession = Depends(get_current_session),
    store: MoodStore = Depends(get_store),
):
    """save a note for the selected date. one detected mood or none (neutral)."""
    try:
        result = await session.save_mood(store, body.note)
    except ValidationError as e:
        rejection = MoodRejection(message=e.message, reason=e.reason, detectedMoods=e.detected_moods)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=rejection.model_dump(by_alias=True),
        )
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    return MoodSaveResponse(
        message=result["message"],
        entry=MoodItem.from_record(result["entry"]),
        moods=[MoodItem.from_record(r) for r in session.moods],
        loadError=result["load_error"],
    )


@router.post("/detect", response_model=DetectResponse)
async def detect(body: DetectRequest):
    """classification preview, no store call, no login needed"""
    return DetectResponse(moods=detect_moods(body.note), sentiment=get_sentiment(body.note))


@router.get("/colors", response_model=dict[str, str])
async def colors():
    """sentiment -> background colour table"""
    return SENTIMENT_COLORS
