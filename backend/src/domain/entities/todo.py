"""Todo entity."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from domain.entities.timestamps import next_updated_at, utc_now
from domain.enums import TodoStatus
from domain.value_objects import TodoBody, TodoId, TodoTitle, UserId


@dataclass(frozen=True, eq=False)
class Todo:
    """
    Entity representing a single task owned by a user.

    Instances are immutable: every change_* method returns a new Todo
    with the same id and created_at and a refreshed updated_at.
    Equality is based on the identifier only.

    Attributes:
        id: Todo identifier
        user_id: Identifier of the owning user (reference by value)
        title: Todo title
        body: Todo body, possibly empty
        status: Current progress state
        created_at: Creation time
        updated_at: Last modification time (never earlier than created_at)
    """

    id: TodoId
    user_id: UserId
    title: TodoTitle
    body: TodoBody
    status: TodoStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        user_id: UserId,
        title: TodoTitle,
        body: Optional[TodoBody] = None,
    ) -> "Todo":
        """Create a new todo with a fresh id in the NOT_STARTED state."""
        now = utc_now()
        return cls(
            id=TodoId.generate(),
            user_id=user_id,
            title=title,
            body=body if body is not None else TodoBody.empty(),
            status=TodoStatus.NOT_STARTED,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: TodoId,
        user_id: UserId,
        title: TodoTitle,
        body: TodoBody,
        status: TodoStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Todo":
        """Rebuild a stored todo without touching its timestamps."""
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            body=body,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )

    def change_title(self, title: TodoTitle) -> "Todo":
        return self._changed(title=title)

    def change_body(self, body: TodoBody) -> "Todo":
        return self._changed(body=body)

    def change_status(self, status: TodoStatus) -> "Todo":
        return self._changed(status=status)

    def _changed(self, **fields) -> "Todo":
        return replace(self, updated_at=next_updated_at(self.updated_at), **fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Todo):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Todo(id={self.id}, user_id={self.user_id}, status={self.status})"
