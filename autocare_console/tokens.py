"""
Helpers for the access token issued by the backend.

The console never verifies the signature; it only reads the claims to show
who is signed in and to notice expiry before the backend does.
"""
import logging
import time
from typing import Optional

from jose import jwt
from jose.exceptions import JOSEError
from pydantic import ValidationError

from autocare_console.schemas.user import ConsoleUser, DecodedToken

logger = logging.getLogger(__name__)


def _claims(token: Optional[str]) -> Optional[DecodedToken]:
    if not token:
        return None
    try:
        return DecodedToken.model_validate(jwt.get_unverified_claims(token))
    except (JOSEError, ValidationError) as e:
        logger.error("Error decoding token: %s", e)
        return None


def _expires_at_ms(decoded: DecodedToken) -> float:
    return decoded.exp * 1000 if decoded.exp else 0


def _now_ms() -> float:
    return time.time() * 1000


def is_token_valid(token: Optional[str]) -> bool:
    decoded = _claims(token)
    if decoded is None:
        return False
    return _expires_at_ms(decoded) > _now_ms()


def get_decoded_token(token: Optional[str]) -> Optional[DecodedToken]:
    """Claims of ``token``, or None when it is missing, malformed or expired."""
    decoded = _claims(token)
    if decoded is None:
        return None
    if _expires_at_ms(decoded) <= _now_ms():
        logger.warning("Token expired")
        return None
    return decoded


def get_user_from_token(token: Optional[str]) -> ConsoleUser:
    decoded = get_decoded_token(token)
    if decoded is None:
        return ConsoleUser()

    return ConsoleUser(
        is_authenticated=True,
        name=decoded.firstname or decoded.sub,
        role=decoded.roles[0] if decoded.roles else "USER",
        components=decoded.component_names,
    )


def get_time_until_expiration(token: Optional[str]) -> Optional[float]:
    """Milliseconds left before ``token`` expires, None if already expired."""
    decoded = _claims(token)
    if decoded is None:
        return None
    remaining = _expires_at_ms(decoded) - _now_ms()
    return remaining if remaining > 0 else None
