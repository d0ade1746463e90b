# journal router: journal screen state and date picker

import logging

from fastapi import APIRouter, Depends

from moodjournal.dependencies import get_current_session
from moodjournal.models.mood import EMPTY_HISTORY_TEXT, DatePick, JournalScreen, MoodItem
from moodjournal.services.journal_service import to_day_string
from moodjournal.services.session import JournalSession

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/journal", tags=["journal"])


def _screen(session: JournalSession) -> JournalScreen:
    """render the journal screen from the session's in-memory state"""
    items = [MoodItem.from_record(r) for r in session.moods]
    return JournalScreen(
        loggedInAs=session.contract_number,
        selectedDate=to_day_string(session.selected_date),
        note=session.note,
        loading=session.loading,
        moods=items,
        emptyText=None if items else EMPTY_HISTORY_TEXT,
    )


@router.get("", response_model=JournalScreen)
async def get_journal(session: JournalSession = Depends(get_current_session)):
    """current journal screen (no store call; history as last loaded)"""
    return _screen(session)


@router.put("/date", response_model=JournalScreen)
async def pick_date(
    body: DatePick,
    session: JournalSession = Depends(get_current_session),
):
    """set the selected date; a null date leaves it unchanged"""
    session.pick_date(body.selected)
    return _screen(session)
