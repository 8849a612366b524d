"""Identifier value objects backed by time-ordered UUIDs (version 7)."""

import re
from dataclasses import dataclass

from uuid6 import uuid7

from domain.exceptions import ValidationError


_UUID_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")


@dataclass(frozen=True)
class BaseId:
    """
    Base class for entity identifiers.

    Two identifiers are equal only when they are of the same concrete
    class and hold the same string, so a UserId never equals a TodoId.

    Attributes:
        value: Canonical hyphenated lowercase UUID string
    """

    value: str

    def __post_init__(self) -> None:
        """Validate identifier format."""
        if not self.value:
            raise ValidationError("ID cannot be empty")
        if not isinstance(self.value, str) or not _UUID_PATTERN.fullmatch(self.value):
            raise ValidationError("Invalid UUID format")

    @classmethod
    def generate(cls):
        """Create a new, time-sortable identifier."""
        return cls(str(uuid7()))

    @classmethod
    def from_value(cls, value: str):
        """Restore an identifier from its string form, lower-casing hex digits."""
        return cls(value.lower() if isinstance(value, str) else value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TodoId(BaseId):
    """Identifier of a Todo entity."""


@dataclass(frozen=True)
class UserId(BaseId):
    """Identifier of a User entity."""
