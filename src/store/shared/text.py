"""Small text helpers shared by catalogue elements."""

import json
import re

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(value):
    """`"Classic Black Tee!"` -> `"classic-black-tee"`."""
    return _NON_SLUG.sub("-", (value or "").lower()).strip("-")


def split_csv(value):
    """Split a comma-separated form value into trimmed, non-empty parts."""
    if value is None:
        return []
    if isinstance(value, list | tuple):
        return [str(v).strip() for v in value if str(v).strip()]
    return [part.strip() for part in str(value).split(",") if part.strip()]


def dump_list(values):
    return json.dumps(list(values or []))


def load_list(raw):
    if not raw:
        return []
    return json.loads(raw) if isinstance(raw, str) else list(raw)


def load_dict(raw):
    if not raw:
        return {}
    return json.loads(raw) if isinstance(raw, str) else dict(raw)
