# mood models: note submission, history items, and journal screen
# history items carry the background colour chosen from the sentiment

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from moodjournal.services.sentiment_colors import sentiment_color

EMPTY_HISTORY_TEXT = "No moods yet."


class MoodCreate(BaseModel):
    """payload for saving a note against the session's selected date"""
    note: Optional[str] = Field(None, description="free-text note, must not be blank")


class MoodItem(BaseModel):
    """one stored mood record as rendered in the history list"""
    id: str
    dt: str
    user_id: str = Field("", alias="userId")
    note: str = ""
    sentiment: str = ""
    background_color: str = Field(..., alias="backgroundColor")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_record(cls, record: dict) -> "MoodItem":
        return cls(
            id=record.get("id") or "",
            dt=record.get("dt") or "",
            user_id=record.get("user_id") or "",
            note=record.get("note") or "",
            sentiment=record.get("sentiment") or "",
            background_color=sentiment_color(record.get("sentiment")),
        )


class MoodSaveResponse(BaseModel):
    message: str
    entry: MoodItem
    moods: list[MoodItem] = Field(default_factory=list)
    load_error: Optional[str] = Field(None, alias="loadError")

    model_config = {"populate_by_name": True}


class MoodRejection(BaseModel):
    """422 detail body for a rejected save"""
    message: str
    reason: str
    detected_moods: list[str] = Field(default_factory=list, alias="detectedMoods")

    model_config = {"populate_by_name": True}


class DetectRequest(BaseModel):
    note: Optional[str] = None


class DetectResponse(BaseModel):
    moods: list[str] = Field(default_factory=list)
    sentiment: str


class DatePick(BaseModel):
    """null date means the picker was dismissed"""
    selected: Optional[datetime] = Field(None, alias="date")

    model_config = {"populate_by_name": True}


class JournalScreen(BaseModel):
    logged_in_as: str = Field(..., alias="loggedInAs")
    selected_date: str = Field(..., alias="selectedDate")
    note: str = ""
    loading: bool = False
    moods: list[MoodItem] = Field(default_factory=list)
    empty_text: Optional[str] = Field(None, alias="emptyText")

    model_config = {"populate_by_name": True}
