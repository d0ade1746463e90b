# domain errors raised by the services layer
# routers translate these into http responses

from typing import Optional


class JournalError(Exception):
    """base class for all user-visible journal errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JournalError):
    """rejected locally before any store call (empty note, ambiguous mood, bad login)"""

    def __init__(self, message: str, reason: str, detected_moods: Optional[list[str]] = None):
        super().__init__(message)
        self.reason = reason
        self.detected_moods = detected_moods or []


class StoreError(JournalError):
    """the record store reported a failure; message is passed through as-is"""

    def __init__(self, message: str, store_message: str):
        super().__init__(message)
        self.store_message = store_message
