"""Todo body value object."""

from dataclasses import dataclass

from domain.exceptions import ValidationError


MAX_BODY_LENGTH = 1000


@dataclass(frozen=True)
class TodoBody:
    """
    Immutable free-text body of a todo.

    The empty string is a valid body and marks the "no body" state.
    Non-empty bodies must not carry leading or trailing whitespace.

    Attributes:
        value: 0-1000 characters
    """

    value: str

    def __post_init__(self) -> None:
        """Validate body constraints."""
        if self.value == "":
            return
        if self.value.strip() != self.value:
            raise ValidationError("TodoBody cannot have leading or trailing spaces")
        if len(self.value) > MAX_BODY_LENGTH:
            raise ValidationError(
                f"TodoBody must be at most {MAX_BODY_LENGTH} characters"
            )

    @classmethod
    def from_value(cls, value: str) -> "TodoBody":
        return cls(value)

    @classmethod
    def empty(cls) -> "TodoBody":
        """Create a body in the empty state."""
        return cls("")

    def is_empty(self) -> bool:
        return self.value == ""

    def __str__(self) -> str:
        return self.value
