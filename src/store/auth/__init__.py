"""Credential handling: password hashes and bearer tokens."""

from store.auth.passwords import hash_password, verify_password
from store.auth.tokens import InvalidTokenError, decode_token, issue_token

__all__ = ["InvalidTokenError", "decode_token", "hash_password", "issue_token", "verify_password"]
