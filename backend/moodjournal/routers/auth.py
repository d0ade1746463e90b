# auth router: contract-number login
# local format check only; a successful login loads the mood history

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from moodjournal.dependencies import get_store
from moodjournal.exceptions import StoreError, ValidationError
from moodjournal.models.user import LoginResponse, UserLogin
from moodjournal.services.mood_store import MoodStore
from moodjournal.services.session import SessionRegistry, get_sessions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: UserLogin,
    sessions: SessionRegistry = Depends(get_sessions),
    store: MoodStore = Depends(get_store),
):
    """validate contract number + password and open the journal session"""
    try:
        session = sessions.login(body.contract_number, body.password)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        )

    # history is loaded as soon as the user is in
    load_error = None
    try:
        await session.load_moods(store)
    except StoreError as e:
        load_error = e.message

    return LoginResponse(contractNumber=session.contract_number, loadError=load_error)
