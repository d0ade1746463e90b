# auth service: local contract-number login gate
# format check only, no identity provider, no tokens

import logging
import re
from typing import Optional

from moodjournal.config import settings
from moodjournal.exceptions import ValidationError

logger = logging.getLogger(__name__)

# RE-#####/YY, e.g. RE-71904/24
CONTRACT_NUMBER_PATTERN = re.compile(r"^RE-\d{5}/\d{2}$")

CONTRACT_NUMBER_HINT = "Contract number must look like RE-71904/24"


def password_hint() -> str:
    return f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters."


def is_valid_contract_number(identifier: Optional[str]) -> bool:
    """check the trimmed identifier against the contract-number pattern"""
    if not identifier:
        return False
    return CONTRACT_NUMBER_PATTERN.match(identifier.strip()) is not None


def attempt_login(identifier: Optional[str], password: Optional[str]) -> str:
    """validate login fields locally. returns the accepted (trimmed) contract
    number, raises ValidationError with a user-facing hint otherwise."""
    if not is_valid_contract_number(identifier):
        logger.info("Login rejected: malformed contract number")
        raise ValidationError(CONTRACT_NUMBER_HINT, reason="invalid contract number")

    if not password or len(password) < settings.MIN_PASSWORD_LENGTH:
        logger.info("Login rejected: password too short")
        raise ValidationError(password_hint(), reason="password too short")

    return identifier.strip()
