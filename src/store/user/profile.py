"""Profile maintenance — commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from store.domain import store
from store.user.user import User


@store.command(part_of="User")
class UpdateProfile:
    """Change personal details. Omitted fields keep their current value."""

    user_id: Identifier(required=True)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    phone: String(max_length=20)


@store.command(part_of="User")
class GrantAdmin:
    user_id: Identifier(required=True)


@store.command_handler(part_of=User)
class ManageProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        changes = {
            field: getattr(command, field)
            for field in ("first_name", "last_name", "phone")
            if getattr(command, field) is not None
        }
        user.update_profile(**changes)
        repo.add(user)

    @handle(GrantAdmin)
    def grant_admin(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.grant_admin()
        repo.add(user)
