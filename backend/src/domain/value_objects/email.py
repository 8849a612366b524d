"""Email value object."""

import re
from dataclasses import dataclass

from domain.exceptions import ValidationError


MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64
MAX_DOMAIN_LENGTH = 255

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True, eq=False)
class Email:
    """
    Immutable email address.

    The raw value keeps the caller's casing; comparison and hashing use
    the lowercased form.

    Attributes:
        value: Address as provided
    """

    value: str

    def __post_init__(self) -> None:
        """Validate address shape and length limits."""
        if not self.value:
            raise ValidationError("Email cannot be empty")
        if self.value.count("@") != 1:
            raise ValidationError("Invalid email format")

        local_part, domain = self.value.split("@")
        if not local_part or not domain:
            raise ValidationError("Invalid email format")
        if len(local_part) > MAX_LOCAL_PART_LENGTH:
            raise ValidationError(
                f"Email local part is too long (max {MAX_LOCAL_PART_LENGTH} characters)"
            )
        if len(domain) > MAX_DOMAIN_LENGTH:
            raise ValidationError(
                f"Email domain is too long (max {MAX_DOMAIN_LENGTH} characters)"
            )
        # RFC 5321 path limit
        if len(self.value) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email is too long (max {MAX_EMAIL_LENGTH} characters)"
            )
        if not _EMAIL_PATTERN.fullmatch(self.value):
            raise ValidationError("Invalid email format")

    @classmethod
    def from_value(cls, value: str) -> "Email":
        return cls(value)

    @property
    def normalized(self) -> str:
        """Lowercased address used for comparison."""
        return self.value.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self.normalized == other.normalized

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self.value
