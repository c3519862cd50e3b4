"""Domain events for the Category aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from store.domain import store


@store.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the catalogue hierarchy."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
    parent_category_id: Identifier()
    level: Integer(required=True)


@store.event(part_of="Category")
class CategoryDetailsUpdated:
    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)


@store.event(part_of="Category")
class CategoryReordered:
    """A category's display position was changed."""

    __version__ = 1

    category_id: Identifier(required=True)
    previous_order: Integer(required=True)
    new_order: Integer(required=True)


@store.event(part_of="Category")
class CategoryDeactivated:
    __version__ = 1

    category_id: Identifier(required=True)
    deactivated_at: DateTime(required=True)
