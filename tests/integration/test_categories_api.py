"""Integration tests for the categories API via TestClient."""


def _create(client, headers, name, parent=None):
    return client.post("/api/categories", json={"name": name, "parent_category_id": parent}, headers=headers)


class TestCategoriesAPI:
    def test_create_category(self, client, admin_headers):
        response = _create(client, admin_headers, "Graphic Tees")

        assert response.status_code == 201
        category = response.json()
        assert category["slug"] == "graphic-tees"
        assert category["level"] == 0
        assert category["is_active"] is True

    def test_child_category_sits_one_level_down(self, client, admin_headers):
        parent = _create(client, admin_headers, "Tees").json()["id"]

        child = _create(client, admin_headers, "Band Tees", parent=parent).json()

        assert child["parent_category_id"] == parent
        assert child["level"] == 1

    def test_hierarchy_depth_is_limited(self, client, admin_headers):
        parent = None
        for depth in range(5):
            parent = _create(client, admin_headers, f"Level {depth}", parent=parent).json()["id"]

        response = _create(client, admin_headers, "Too deep", parent=parent)

        assert response.status_code == 400
        assert response.json()["message"] == "Category hierarchy cannot exceed 5 levels (depth 0-4)"

    def test_unknown_parent_returns_400(self, client, admin_headers):
        response = _create(client, admin_headers, "Orphan", parent="missing")

        assert response.status_code == 400
        assert response.json()["message"] == "Parent category not found"

    def test_create_requires_admin(self, client, customer):
        _, headers = customer
        assert _create(client, headers, "Tees").status_code == 403

    def test_public_listing_is_ordered_and_active_only(self, client, admin_headers):
        first = _create(client, admin_headers, "First").json()["id"]
        second = _create(client, admin_headers, "Second").json()["id"]
        retired = _create(client, admin_headers, "Retired").json()["id"]
        client.put(f"/api/categories/{first}/reorder", json={"new_display_order": 5}, headers=admin_headers)
        client.put(f"/api/categories/{retired}/deactivate", headers=admin_headers)

        response = client.get("/api/categories")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [second, first]

    def test_update_category(self, client, admin_headers):
        category_id = _create(client, admin_headers, "Tees").json()["id"]

        response = client.put(
            f"/api/categories/{category_id}",
            json={"name": "Summer Tees", "featured": True},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["slug"] == "summer-tees"
        assert response.json()["featured"] is True

    def test_deactivating_twice_returns_400(self, client, admin_headers):
        category_id = _create(client, admin_headers, "Tees").json()["id"]
        client.put(f"/api/categories/{category_id}/deactivate", headers=admin_headers)

        response = client.put(f"/api/categories/{category_id}/deactivate", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Category is already inactive"

    def test_missing_category_returns_404(self, client):
        response = client.get("/api/categories/missing")

        assert response.status_code == 404
        assert response.json()["message"] == "Category not found"
