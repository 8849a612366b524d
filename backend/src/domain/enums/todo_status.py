"""Lifecycle states of a todo."""

from enum import Enum

from domain.exceptions import ValidationError


class TodoStatus(str, Enum):
    """Progress state of a todo. Any state may move to any other."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"

    @classmethod
    def from_value(cls, value: str) -> "TodoStatus":
        """Convert a raw status string, rejecting unknown values."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Invalid TodoStatus: {value}") from None

    def __str__(self) -> str:
        return self.value
