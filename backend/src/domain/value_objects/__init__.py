"""Domain Value Objects - Immutable objects without identity."""

from .identifier import BaseId, TodoId, UserId
from .todo_title import TodoTitle
from .todo_body import TodoBody
from .email import Email
from .username import Username

__all__ = [
    "BaseId",
    "TodoId",
    "UserId",
    "TodoTitle",
    "TodoBody",
    "Email",
    "Username",
]
