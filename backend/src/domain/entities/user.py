"""User entity."""

from dataclasses import dataclass, replace
from datetime import datetime

from domain.entities.timestamps import next_updated_at, utc_now
from domain.value_objects import Email, UserId, Username


@dataclass(frozen=True, eq=False)
class User:
    """
    Entity representing a registered user.

    Immutable; change_email/change_name return a new User.
    Equality is based on the identifier only.
    """

    id: UserId
    email: Email
    name: Username
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, email: Email, name: Username) -> "User":
        """Create a new user with a fresh id."""
        now = utc_now()
        return cls(
            id=UserId.generate(),
            email=email,
            name=name,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: UserId,
        email: Email,
        name: Username,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild a stored user without touching its timestamps."""
        return cls(
            id=id,
            email=email,
            name=name,
            created_at=created_at,
            updated_at=updated_at,
        )

    def change_email(self, email: Email) -> "User":
        return replace(self, email=email, updated_at=next_updated_at(self.updated_at))

    def change_name(self, name: Username) -> "User":
        return replace(self, name=name, updated_at=next_updated_at(self.updated_at))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"User(id={self.id})"
