"""Category management — commands and handlers."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from store.category.category import Category
from store.domain import store

_DETAIL_FIELDS = ("description", "image", "featured", "meta_title", "meta_description")


@store.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()
    parent_category_id: Identifier()
    image: String(max_length=500)
    featured: Boolean(default=False)
    meta_title: String(max_length=70)
    meta_description: String(max_length=160)


@store.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()
    image: String(max_length=500)
    featured: Boolean()
    meta_title: String(max_length=70)
    meta_description: String(max_length=160)


@store.command(part_of="Category")
class ReorderCategory:
    category_id: Identifier(required=True)
    new_display_order: Integer(required=True)


@store.command(part_of="Category")
class DeactivateCategory:
    category_id: Identifier(required=True)


@store.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        parent = None
        if command.parent_category_id:
            try:
                parent = repo.get(command.parent_category_id)
            except ObjectNotFoundError:
                raise ValidationError({"parent_category_id": ["Parent category not found"]}) from None

        details = {f: getattr(command, f) for f in _DETAIL_FIELDS if getattr(command, f) is not None}
        category = Category.create(name=command.name, parent=parent, **details)
        repo.add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        changes = {f: getattr(command, f) for f in ("name", *_DETAIL_FIELDS) if getattr(command, f) is not None}
        category.update_details(**changes)
        repo.add(category)

    @handle(ReorderCategory)
    def reorder_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.reorder(command.new_display_order)
        repo.add(category)

    @handle(DeactivateCategory)
    def deactivate_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.deactivate()
        repo.add(category)
