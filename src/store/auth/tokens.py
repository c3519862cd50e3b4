"""JWT issuing and verification for API sessions."""

from datetime import UTC, datetime, timedelta

import jwt
import structlog
from jwt import InvalidTokenError

from store.config import get_settings

logger = structlog.get_logger(__name__)

__all__ = ["InvalidTokenError", "decode_token", "issue_token"]


def issue_token(user_id: str) -> str:
    """Create a signed token carrying the user id."""
    settings = get_settings()
    now = datetime.now(UTC)
    payload = {
        "id": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=settings.jwt_expiry_hours)).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> str:
    """Return the user id from a token.

    Raises:
        InvalidTokenError: the token is malformed, tampered with, expired,
            or carries no user id.
    """
    settings = get_settings()
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    user_id = payload.get("id")
    if not user_id:
        logger.warning("Token without user id rejected")
        raise InvalidTokenError("Token carries no user id")
    return str(user_id)
