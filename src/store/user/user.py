"""User aggregate root with the Address entity."""

from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, String, Text, ValueObject

from store.domain import store
from store.shared.email import EmailAddress
from store.shared.phone import PhoneNumber
from store.shared.text import dump_list, load_list
from store.user.events import (
    AddressAdded,
    AddressRemoved,
    AdminGranted,
    DefaultAddressChanged,
    PasswordChanged,
    ProfileUpdated,
    UserLoggedIn,
    UserRegistered,
    WishlistChanged,
)

MAX_ADDRESSES = 10

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


@store.entity(part_of="User")
class Address:
    """A saved delivery address. Exactly one is the default once any exist."""

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


@store.aggregate
class User:
    """A store account: credentials, personal details, addresses and wishlist.

    Usernames and emails are unique across accounts. The password is only ever
    held as a bcrypt hash.
    """

    username: String(required=True, max_length=50, unique=True)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    is_admin: Boolean(default=False)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    phone: ValueObject(PhoneNumber)
    addresses: HasMany(Address)
    wishlist: Text()
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)
    last_login_at: DateTime()

    @invariant.post
    def addresses_cannot_exceed_maximum(self):
        if len(self.addresses) > MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Cannot have more than {MAX_ADDRESSES} addresses"]})

    @invariant.post
    def exactly_one_default_address_when_addresses_exist(self):
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError({"addresses": ["Exactly one address must be marked as default"]})

    @classmethod
    def register(cls, username, email, password_hash, is_admin=False):
        username = (username or "").strip()
        if not username:
            raise ValidationError({"username": ["Username is required"]})

        email_vo = EmailAddress.normalized(email)
        now = datetime.now()

        user = cls(
            username=username,
            email=email_vo.address,
            password_hash=password_hash,
            is_admin=is_admin,
            wishlist=dump_list([]),
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                username=username,
                email=email_vo.address,
                is_admin=is_admin,
                registered_at=now,
            )
        )
        return user

    @property
    def wishlist_ids(self):
        return load_list(self.wishlist)

    def record_login(self):
        now = datetime.now()
        self.last_login_at = now
        self.raise_(UserLoggedIn(user_id=self.id, logged_in_at=now))

    def update_profile(self, first_name=_UNSET, last_name=_UNSET, phone=_UNSET):
        if first_name is not _UNSET:
            self.first_name = first_name
        if last_name is not _UNSET:
            self.last_name = last_name
        if phone is not _UNSET:
            self.phone = PhoneNumber(number=phone) if phone else None

        self.updated_at = datetime.now()
        self.raise_(
            ProfileUpdated(
                user_id=self.id,
                first_name=self.first_name,
                last_name=self.last_name,
                phone=self.phone.number if self.phone else None,
            )
        )

    def change_password(self, new_password_hash):
        now = datetime.now()
        self.password_hash = new_password_hash
        self.updated_at = now
        self.raise_(PasswordChanged(user_id=self.id, changed_at=now))

    def grant_admin(self):
        if self.is_admin:
            return

        now = datetime.now()
        self.is_admin = True
        self.updated_at = now
        self.raise_(AdminGranted(user_id=self.id, granted_at=now))

    # -------------------------------------------------------------------
    # Address book
    # -------------------------------------------------------------------
    def _find_address(self, address_id):
        address = next((a for a in self.addresses if str(a.id) == str(address_id)), None)
        if address is None:
            raise ValidationError({"addresses": [f"Address {address_id} not found"]})
        return address

    def add_address(self, is_default=False, **details):
        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for addr in self.addresses:
                    if addr.is_default:
                        addr.is_default = False

            address = Address(is_default=is_default, **details)
            self.add_addresses(address)

        self.updated_at = datetime.now()
        self.raise_(
            AddressAdded(
                user_id=self.id,
                address_id=address.id,
                city=address.city,
                country=address.country,
                is_default=is_default,
            )
        )
        return address

    def remove_address(self, address_id):
        address = self._find_address(address_id)
        was_default = address.is_default

        with atomic_change(self):
            self.remove_addresses(address)

            # If the default went away, promote the first remaining address
            if was_default and self.addresses:
                self.addresses[0].is_default = True

        self.updated_at = datetime.now()
        self.raise_(AddressRemoved(user_id=self.id, address_id=address_id))

    def set_default_address(self, address_id):
        address = self._find_address(address_id)

        previous_default = next((a for a in self.addresses if a.is_default), None)
        previous_default_id = previous_default.id if previous_default else None

        with atomic_change(self):
            for addr in self.addresses:
                if addr.is_default:
                    addr.is_default = False
            address.is_default = True

        self.updated_at = datetime.now()
        self.raise_(
            DefaultAddressChanged(
                user_id=self.id,
                address_id=address_id,
                previous_default_address_id=previous_default_id,
            )
        )

    # -------------------------------------------------------------------
    # Wishlist
    # -------------------------------------------------------------------
    def add_to_wishlist(self, product_id):
        product_id = str(product_id)
        ids = self.wishlist_ids
        if product_id in ids:
            return

        ids.append(product_id)
        self.wishlist = dump_list(ids)
        self.updated_at = datetime.now()
        self.raise_(WishlistChanged(user_id=self.id, product_id=product_id, action="added"))

    def remove_from_wishlist(self, product_id):
        product_id = str(product_id)
        ids = self.wishlist_ids
        if product_id not in ids:
            raise ValidationError({"wishlist": [f"Product {product_id} is not in the wishlist"]})

        ids.remove(product_id)
        self.wishlist = dump_list(ids)
        self.updated_at = datetime.now()
        self.raise_(WishlistChanged(user_id=self.id, product_id=product_id, action="removed"))
