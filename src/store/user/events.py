"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from store.domain import store


@store.event(part_of="User")
class UserRegistered:
    """A new account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)
    is_admin: Boolean(default=False)
    registered_at: DateTime(required=True)


@store.event(part_of="User")
class UserLoggedIn:
    __version__ = 1

    user_id: Identifier(required=True)
    logged_in_at: DateTime(required=True)


@store.event(part_of="User")
class ProfileUpdated:
    """A user's personal details changed."""

    __version__ = 1

    user_id: Identifier(required=True)
    first_name: String()
    last_name: String()
    phone: String()


@store.event(part_of="User")
class PasswordChanged:
    __version__ = 1

    user_id: Identifier(required=True)
    changed_at: DateTime(required=True)


@store.event(part_of="User")
class AdminGranted:
    """The account was given administrator privileges."""

    __version__ = 1

    user_id: Identifier(required=True)
    granted_at: DateTime(required=True)


@store.event(part_of="User")
class AddressAdded:
    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    city: String(required=True)
    country: String(required=True)
    is_default: Boolean(default=False)


@store.event(part_of="User")
class AddressRemoved:
    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@store.event(part_of="User")
class DefaultAddressChanged:
    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    previous_default_address_id: Identifier()


@store.event(part_of="User")
class WishlistChanged:
    """A product was added to or removed from a wishlist."""

    __version__ = 1

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    action: String(required=True, max_length=10)
