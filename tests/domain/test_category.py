import pytest
from protean.exceptions import ValidationError

from store.category.category import MAX_LEVEL, Category
from store.category.events import CategoryDeactivated, CategoryReordered


class TestCategory:
    def test_root_category(self):
        category = Category.create(name="Graphic Tees", description="Printed designs")

        assert category.level == 0
        assert category.slug == "graphic-tees"
        assert category.is_active is True

    def test_child_level_follows_parent(self):
        parent = Category.create(name="Tees")
        child = Category.create(name="Graphic", parent=parent)

        assert child.level == 1
        assert child.parent_category_id == parent.id

    def test_hierarchy_depth_is_limited(self):
        category = Category.create(name="Level 0")
        for level in range(1, MAX_LEVEL + 1):
            category = Category.create(name=f"Level {level}", parent=category)

        with pytest.raises(ValidationError):
            Category.create(name="Too deep", parent=category)

    def test_reorder(self):
        category = Category.create(name="Tees")
        category.reorder(3)

        assert category.display_order == 3
        assert isinstance(category._events[-1], CategoryReordered)

    def test_deactivate_once(self):
        category = Category.create(name="Tees")
        category.deactivate()

        assert category.is_active is False
        assert isinstance(category._events[-1], CategoryDeactivated)
        with pytest.raises(ValidationError):
            category.deactivate()

    def test_rename_updates_slug(self):
        category = Category.create(name="Tees")
        category.update_details(name="Basic Tees", featured=True)

        assert category.slug == "basic-tees"
        assert category.featured is True
