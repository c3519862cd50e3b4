"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from store.domain import store

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _invalid(email):
    return ValidationError({"email": [f"Invalid email address: {email!r}"]})


@store.value_object
class EmailAddress:
    """A structurally valid email address, always stored lower-cased and trimmed.

    Rules: exactly one @, non-empty local and domain parts without leading or
    trailing dots, a dotted domain whose labels do not start or end with a
    hyphen, no consecutive dots, no whitespace or forbidden punctuation.
    """

    address: String(required=True, max_length=254)

    @classmethod
    def normalized(cls, raw):
        return cls(address=(raw or "").strip().lower())

    @invariant.post
    def verify_email_address(self):
        email = self.address

        if any(ch.isspace() for ch in email):
            raise _invalid(email)

        if email.count("@") != 1:
            raise _invalid(email)

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise _invalid(email)

        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise _invalid(email)

        if "." not in domain_part:
            raise _invalid(email)

        for label in domain_part.split("."):
            if label.startswith("-") or label.endswith("-"):
                raise _invalid(email)

        if ".." in email:
            raise _invalid(email)

        if any(ch in email for ch in _FORBIDDEN):
            raise _invalid(email)
