from store.site.site import DEFAULTS, SETTINGS_KEY, SiteConfig


class TestSiteConfig:
    def test_defaults(self):
        config = SiteConfig.default_settings()
        data = config.as_settings()

        assert config.key == SETTINGS_KEY
        assert data["store_name"] == DEFAULTS["store_name"]
        assert data["shipping"]["methods"][0]["id"] == "standard"

    def test_update_replaces_only_given_sections(self):
        config = SiteConfig.default_settings()
        config.update(store_name="Tee Town", tax={"default": {"rate": 0.08}})
        data = config.as_settings()

        assert data["store_name"] == "Tee Town"
        assert data["tax"] == {"default": {"rate": 0.08}}
        assert data["shipping"] == DEFAULTS["shipping"]
        assert config._events[-1].sections == "store_name,tax"
