"""Use case inputs and outputs, expressed in primitives only."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.entities import Todo, User


@dataclass(frozen=True)
class CreateTodoParam:
    user_id: str
    title: str
    body: Optional[str] = None


@dataclass(frozen=True)
class UpdateTodoParam:
    """
    Partial todo update.

    None means "leave unchanged"; an empty body string clears the body.
    """

    todo_id: str
    title: Optional[str] = None
    body: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class DeleteTodoParam:
    todo_id: str


@dataclass(frozen=True)
class TodoDto:
    id: str
    user_id: str
    title: str
    body: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoDto":
        return cls(
            id=todo.id.value,
            user_id=todo.user_id.value,
            title=todo.title.value,
            body=todo.body.value,
            status=todo.status.value,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )


@dataclass(frozen=True)
class CreateUserParam:
    email: str
    name: str


@dataclass(frozen=True)
class UpdateUserParam:
    """Partial user update; None means "leave unchanged"."""

    user_id: str
    email: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class DeleteUserParam:
    user_id: str


@dataclass(frozen=True)
class UserDto:
    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDto":
        return cls(
            id=user.id.value,
            email=user.email.value,
            name=user.name.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
