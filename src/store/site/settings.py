"""Site settings — command, handler and lookup."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from store.domain import store
from store.shared.text import load_dict
from store.site.site import SECTIONS, SETTINGS_KEY, SiteConfig


def load_site_config():
    """The stored settings, or the defaults when nothing was saved yet."""
    try:
        return current_domain.repository_for(SiteConfig).get(SETTINGS_KEY)
    except ObjectNotFoundError:
        return SiteConfig.default_settings()


@store.command(part_of="SiteConfig")
class UpdateSiteConfig:
    store_name: String(max_length=100)
    contact: Text()  # JSON object
    social: Text()  # JSON object
    shipping: Text()  # JSON object
    tax: Text()  # JSON object
    analytics: Text()  # JSON object


@store.command_handler(part_of=SiteConfig)
class UpdateSiteConfigHandler:
    @handle(UpdateSiteConfig)
    def update_site_config(self, command):
        config = load_site_config()
        sections = {
            section: load_dict(getattr(command, section))
            for section in SECTIONS
            if getattr(command, section) is not None
        }
        config.update(store_name=command.store_name, **sections)
        current_domain.repository_for(SiteConfig).add(config)
        return config.as_settings()
