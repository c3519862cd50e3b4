"""Integration tests for the site configuration API via TestClient."""


class TestSiteConfigAPI:
    def test_defaults_when_nothing_is_stored(self, client):
        response = client.get("/api/config")

        assert response.status_code == 200
        config = response.json()
        assert config["store_name"] == "T-Shirt Haven"
        assert [m["id"] for m in config["shipping"]["methods"]] == ["standard", "express"]

    def test_admin_updates_sections(self, client, admin_headers):
        response = client.put(
            "/api/config",
            json={"store_name": "Tee Town", "contact": {"email": "hi@teetown.test"}},
            headers=admin_headers,
        )

        assert response.status_code == 200
        config = client.get("/api/config").json()
        assert config["store_name"] == "Tee Town"
        assert config["contact"] == {"email": "hi@teetown.test"}
        assert config["shipping"]["methods"][0]["id"] == "standard"

    def test_update_requires_admin(self, client, customer):
        _, headers = customer

        response = client.put("/api/config", json={"store_name": "Mine"}, headers=headers)

        assert response.status_code == 403
        assert response.json()["message"] == "Access denied. Admin privileges required."
