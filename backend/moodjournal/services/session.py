# journal session: per-user form state behind the login and journal screens
# LoggedOut -> LoggedIn only; there is no logout and sessions never expire

import logging
from datetime import date, datetime, timezone
from typing import Optional, Union

from moodjournal.exceptions import StoreError
from moodjournal.services import auth_service
from moodjournal.services.journal_service import SAVED_MESSAGE, save_entry
from moodjournal.services.mood_store import MoodStore

logger = logging.getLogger(__name__)


class JournalSession:
    """form state for one logged-in user: selected date, note, history"""

    def __init__(self):
        self.logged_in: bool = False
        self.contract_number: str = ""
        self.selected_date: Union[datetime, date] = datetime.now(timezone.utc)
        self.note: str = ""
        self.moods: list[dict] = []
        self.loading: bool = False

    def attempt_login(self, identifier: Optional[str], password: Optional[str]) -> str:
        """run the local login gate. on success the session is logged in for good;
        a rejected attempt raises ValidationError and leaves the session as it was."""
        contract_number = auth_service.attempt_login(identifier, password)
        self.contract_number = contract_number
        self.logged_in = True
        logger.info(f"Logged in: {contract_number}")
        return contract_number

    def pick_date(self, selected: Optional[Union[datetime, date]]):
        """a dismissed picker (None) keeps the current date"""
        if selected is None:
            return self.selected_date
        self.selected_date = selected
        return self.selected_date

    async def load_moods(self, store: MoodStore) -> list[dict]:
        """replace the history with the store's current contents.
        on failure the previous list is kept and StoreError propagates."""
        self.loading = True
        try:
            self.moods = await store.select()
        finally:
            self.loading = False
        return self.moods

    async def save_mood(self, store: MoodStore, note: Optional[str]) -> dict:
        """save per the exact-one-mood policy, then clear the note and reload.
        the note and history are untouched when validation or the insert fails.
        a failed reload after a successful insert is reported, not raised."""
        self.note = note or ""
        saved = await save_entry(store, note, self.selected_date, self.contract_number)
        self.note = ""

        load_error = None
        try:
            await self.load_moods(store)
        except StoreError as e:
            load_error = e.message

        return {"message": SAVED_MESSAGE, "entry": saved, "load_error": load_error}


class SessionRegistry:
    """one JournalSession per contract number for the life of the process"""

    def __init__(self):
        self._sessions: dict[str, JournalSession] = {}

    def get(self, contract_number: Optional[str]) -> Optional[JournalSession]:
        if not contract_number:
            return None
        return self._sessions.get(contract_number.strip())

    def login(self, identifier: Optional[str], password: Optional[str]) -> JournalSession:
        """validate the login and return the logged-in session for that contract
        number. a later login with the same number reuses the existing session."""
        existing = self.get(identifier)
        if existing is not None:
            auth_service.attempt_login(identifier, password)
            return existing

        session = JournalSession()
        contract_number = session.attempt_login(identifier, password)
        self._sessions[contract_number] = session
        return session


# singleton instance
sessions = SessionRegistry()


async def get_sessions() -> SessionRegistry:
    """dependency injection for the session registry"""
    return sessions
