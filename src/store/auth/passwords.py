"""Password hashing with bcrypt."""

import bcrypt

_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of a password
_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a plain-text password; the salt is embedded in the result."""
    hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
