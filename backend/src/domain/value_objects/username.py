"""Username value object."""

import re
from dataclasses import dataclass

from domain.exceptions import ValidationError


MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50

_USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class Username:
    """
    Immutable display name of a user. Comparison is case-sensitive.

    Attributes:
        value: 3-50 ASCII letters, digits, underscores or hyphens
    """

    value: str

    def __post_init__(self) -> None:
        """Validate username constraints."""
        if not self.value:
            raise ValidationError("Username cannot be empty")
        if self.value.strip() != self.value:
            raise ValidationError("Username cannot have leading or trailing spaces")
        if len(self.value) < MIN_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters"
            )
        if len(self.value) > MAX_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must be at most {MAX_USERNAME_LENGTH} characters"
            )
        if not _USERNAME_PATTERN.fullmatch(self.value):
            raise ValidationError(
                "Username can only contain alphanumeric characters, "
                "underscores, and hyphens"
            )

    @classmethod
    def from_value(cls, value: str) -> "Username":
        return cls(value)

    def __str__(self) -> str:
        return self.value
