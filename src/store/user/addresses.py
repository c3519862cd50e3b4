"""Address book management — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from store.domain import store
from store.user.user import User

_ADDRESS_FIELDS = (
    "first_name",
    "last_name",
    "address",
    "apartment",
    "city",
    "state",
    "postal_code",
    "country",
    "phone",
)


@store.command(part_of="User")
class AddAddress:
    """Add a delivery address to a user's address book."""

    user_id: Identifier(required=True)
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    address: String(required=True, max_length=255)
    apartment: String(max_length=100)
    city: String(required=True, max_length=100)
    state: String(required=True, max_length=100)
    postal_code: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    phone: String(required=True, max_length=20)
    is_default: Boolean(default=False)


@store.command(part_of="User")
class RemoveAddress:
    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@store.command(part_of="User")
class SetDefaultAddress:
    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@store.command_handler(part_of=User)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        details = {field: getattr(command, field) for field in _ADDRESS_FIELDS}
        address = user.add_address(is_default=bool(command.is_default), **details)
        repo.add(user)
        return str(address.id)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.remove_address(command.address_id)
        repo.add(user)

    @handle(SetDefaultAddress)
    def set_default_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.set_default_address(command.address_id)
        repo.add(user)
