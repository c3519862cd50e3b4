"""Store-wide settings kept as a single SiteConfig record keyed `store_settings`."""

import json
from datetime import datetime

from protean.fields import DateTime, String, Text

from store.domain import store
from store.shared.text import load_dict

SETTINGS_KEY = "store_settings"

DEFAULTS = {
    "store_name": "T-Shirt Haven",
    "contact": {"email": "", "phone": "", "address": ""},
    "social": {"facebook": "", "instagram": "", "twitter": ""},
    "shipping": {
        "methods": [
            {
                "id": "standard",
                "name": "Standard Shipping",
                "description": "Delivery in 3-5 business days",
                "base_rate": 4.99,
                "free_threshold": 50.0,
            },
            {
                "id": "express",
                "name": "Express Shipping",
                "description": "Delivery in 1-2 business days",
                "base_rate": 9.99,
                "free_threshold": 100.0,
            },
        ],
        "countries": ["US"],
    },
    "tax": {"default": {"rate": 0.0, "included_in_prices": False}, "by_state": []},
    "analytics": {},
}

SECTIONS = ("contact", "social", "shipping", "tax", "analytics")


@store.event(part_of="SiteConfig")
class SiteConfigUpdated:
    __version__ = 1

    key: String(required=True)
    sections: String(required=True)
    updated_at: DateTime(required=True)


@store.aggregate
class SiteConfig:
    """Contact details, social links, shipping and tax settings.

    Each section is a JSON document. Settings are served as stored; nothing in
    order placement evaluates them.
    """

    key: String(identifier=True, max_length=50, default=SETTINGS_KEY)
    store_name: String(max_length=100, default=DEFAULTS["store_name"])
    contact: Text()
    social: Text()
    shipping: Text()
    tax: Text()
    analytics: Text()
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def default_settings(cls):
        return cls(
            key=SETTINGS_KEY,
            store_name=DEFAULTS["store_name"],
            **{section: json.dumps(DEFAULTS[section]) for section in SECTIONS},
        )

    def as_settings(self):
        data = {"store_name": self.store_name}
        for section in SECTIONS:
            data[section] = load_dict(getattr(self, section)) or DEFAULTS[section]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data

    def update(self, store_name=None, **sections):
        """Replace the given sections. Sections not passed are left alone."""
        changed = []
        if store_name is not None:
            self.store_name = store_name
            changed.append("store_name")

        for section, value in sections.items():
            if value is None:
                continue
            setattr(self, section, json.dumps(value))
            changed.append(section)

        now = datetime.now()
        self.updated_at = now
        self.raise_(SiteConfigUpdated(key=self.key, sections=",".join(changed), updated_at=now))
