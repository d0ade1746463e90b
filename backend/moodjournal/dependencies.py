# fastapi dependency injection
# provides the logged-in journal session and the mood store

import logging
from typing import Optional
from fastapi import Depends, Header, HTTPException, status

from moodjournal.services.db import Database, get_db
from moodjournal.services.mood_store import MoodStore
from moodjournal.services.session import JournalSession, SessionRegistry, get_sessions

logger = logging.getLogger(__name__)


async def get_store(db: Database = Depends(get_db)) -> MoodStore:
    """mood store bound to the current database"""
    return MoodStore(db)


async def get_current_session(
    contract_number: Optional[str] = Header(None, alias="X-Contract-Number"),
    sessions: SessionRegistry = Depends(get_sessions),
) -> JournalSession:
    """look up the logged-in session for the contract number header.
    the header is an unverified owner key, not a credential."""
    session = sessions.get(contract_number)
    if session is None or not session.logged_in:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return session
