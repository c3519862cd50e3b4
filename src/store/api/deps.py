"""Request dependencies: bearer-token authentication and admin authorization."""

from fastapi import Depends, Header, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from store.auth import InvalidTokenError, decode_token
from store.user.user import User


def current_user(authorization: str | None = Header(default=None)) -> User:
    token = (authorization or "").replace("Bearer ", "", 1).strip()
    if not token:
        raise HTTPException(status_code=401, detail="Authentication required")

    try:
        user_id = decode_token(token)
    except InvalidTokenError:
        raise HTTPException(status_code=401, detail="Authentication failed") from None

    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=401, detail="Authentication invalid") from None


def admin_user(user: User = Depends(current_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Access denied. Admin privileges required.")
    return user


def get_or_404(aggregate_cls, identifier, label):
    """Load an aggregate or answer 404 `<label> not found`."""
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"{label} not found") from None
