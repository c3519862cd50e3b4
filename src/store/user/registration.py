"""User registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from store.auth import hash_password
from store.domain import store
from store.user.user import User
from store.utils.logging import get_logger

logger = get_logger(__name__)


@store.command(part_of="User")
class RegisterUser:
    """Create a new account with a username, email and password."""

    username: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    is_admin: Boolean(default=False)


@store.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_existing(command.email, command.username):
            raise ValidationError({"user": ["User already exists"]})

        user = User.register(
            username=command.username,
            email=command.email,
            password_hash=hash_password(command.password),
            is_admin=bool(command.is_admin),
        )
        repo.add(user)

        logger.info("User registered", user_id=str(user.id), username=user.username)
        return str(user.id)
