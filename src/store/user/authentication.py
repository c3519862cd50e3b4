"""User login — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from store.auth import hash_password, verify_password
from store.domain import store
from store.user.user import User
from store.utils.logging import get_logger

logger = get_logger(__name__)

_INVALID_CREDENTIALS = {"credentials": ["Invalid credentials"]}


@store.command(part_of="User")
class LoginUser:
    """Authenticate with email and password."""

    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)


@store.command(part_of="User")
class ChangePassword:
    user_id: String(required=True)
    current_password: String(required=True, max_length=128)
    new_password: String(required=True, max_length=128)


@store.command_handler(part_of=User)
class AuthenticationHandler:
    @handle(LoginUser)
    def login(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)
        # Unknown email and wrong password are indistinguishable to the caller
        if user is None or not verify_password(command.password, user.password_hash):
            logger.info("Login rejected", email=command.email)
            raise ValidationError(_INVALID_CREDENTIALS)

        user.record_login()
        repo.add(user)
        return str(user.id)

    @handle(ChangePassword)
    def change_password(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        if not verify_password(command.current_password, user.password_hash):
            raise ValidationError({"current_password": ["Current password is incorrect"]})

        user.change_password(hash_password(command.new_password))
        repo.add(user)
