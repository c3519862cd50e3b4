"""Category aggregate root for grouping products."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from store.category.events import CategoryCreated, CategoryDeactivated, CategoryDetailsUpdated, CategoryReordered
from store.domain import store
from store.shared.text import slugify

MAX_LEVEL = 4


@store.aggregate
class Category:
    """A node in the category tree.

    The tree is at most 5 levels deep (0-4). Inactive categories stay in storage
    but are hidden from the public listing.
    """

    name: String(required=True, max_length=100)
    slug: String(max_length=120)
    description: Text()
    parent_category_id: Identifier()
    level: Integer(default=0, min_value=0, max_value=MAX_LEVEL)
    image: String(max_length=500)
    featured: Boolean(default=False)
    display_order: Integer(default=0)
    is_active: Boolean(default=True)
    meta_title: String(max_length=70)
    meta_description: String(max_length=160)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, parent=None, **details):
        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": ["Name is required"]})

        level = 0
        if parent is not None:
            level = parent.level + 1
            if level > MAX_LEVEL:
                raise ValidationError({"level": ["Category hierarchy cannot exceed 5 levels (depth 0-4)"]})

        now = datetime.now()
        category = cls(
            name=name,
            slug=slugify(name),
            parent_category_id=parent.id if parent is not None else None,
            level=level,
            created_at=now,
            updated_at=now,
            **details,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
                slug=category.slug,
                parent_category_id=category.parent_category_id,
                level=level,
            )
        )
        return category

    def update_details(self, **changes):
        if "name" in changes:
            name = (changes.pop("name") or "").strip()
            if not name:
                raise ValidationError({"name": ["Name is required"]})
            self.name = name
            self.slug = slugify(name)

        for field, value in changes.items():
            setattr(self, field, value)

        self.updated_at = datetime.now()
        self.raise_(CategoryDetailsUpdated(category_id=self.id, name=self.name, slug=self.slug))

    def reorder(self, new_display_order):
        previous_order = self.display_order
        self.display_order = new_display_order
        self.updated_at = datetime.now()

        self.raise_(
            CategoryReordered(
                category_id=self.id,
                previous_order=previous_order,
                new_order=new_display_order,
            )
        )

    def deactivate(self):
        if not self.is_active:
            raise ValidationError({"status": ["Category is already inactive"]})

        now = datetime.now()
        self.is_active = False
        self.updated_at = now
        self.raise_(CategoryDeactivated(category_id=self.id, deactivated_at=now))
