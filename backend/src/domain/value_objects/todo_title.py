"""Todo title value object."""

from dataclasses import dataclass

from domain.exceptions import ValidationError


MAX_TITLE_LENGTH = 200


@dataclass(frozen=True)
class TodoTitle:
    """
    Immutable title of a todo.

    Attributes:
        value: 1-200 characters without leading or trailing whitespace
    """

    value: str

    def __post_init__(self) -> None:
        """Validate title constraints."""
        if not self.value:
            raise ValidationError("TodoTitle cannot be empty")
        if self.value.strip() != self.value:
            raise ValidationError("TodoTitle cannot have leading or trailing spaces")
        if len(self.value) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"TodoTitle must be at most {MAX_TITLE_LENGTH} characters"
            )

    @classmethod
    def from_value(cls, value: str) -> "TodoTitle":
        return cls(value)

    def __str__(self) -> str:
        return self.value
