"""Repository for the User aggregate."""

from protean.exceptions import ObjectNotFoundError

from store.domain import store
from store.user.user import User


@store.repository(part_of=User)
class UserRepository:
    """Lookups by id and by the two unique natural keys."""

    def find_by_id(self, user_id) -> User | None:
        try:
            return self.get(user_id)
        except ObjectNotFoundError:
            return None

    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=(email or "").strip().lower()).all().first

    def find_by_username(self, username: str) -> User | None:
        return self._dao.query.filter(username=(username or "").strip()).all().first

    def find_existing(self, email: str, username: str) -> User | None:
        """Return any account already holding this email or username."""
        return self.find_by_email(email) or self.find_by_username(username)
