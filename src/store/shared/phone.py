"""PhoneNumber value object for validated phone numbers."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from store.domain import store

_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")


@store.value_object
class PhoneNumber:
    """Digits, spaces, hyphens and parentheses, with an optional leading +."""

    number: String(required=True, max_length=20)

    @invariant.post
    def validate_phone_format(self):
        number = self.number

        if not re.search(r"\d", number) or not _PHONE_PATTERN.match(number):
            raise ValidationError({"phone": [f"Invalid phone number: {number!r}"]})
