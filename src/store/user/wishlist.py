"""Wishlist management — commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from store.domain import store
from store.user.user import User


@store.command(part_of="User")
class AddToWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@store.command(part_of="User")
class RemoveFromWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@store.command_handler(part_of=User)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        from store.product.product import Product

        # Only catalogue products can be wished for
        if current_domain.repository_for(Product).find_by_id(command.product_id) is None:
            raise ValidationError({"product_id": [f"Product {command.product_id} not found"]})

        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.add_to_wishlist(command.product_id)
        repo.add(user)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.remove_from_wishlist(command.product_id)
        repo.add(user)
