"""Domain Entities - Objects with identity."""

from .todo import Todo
from .user import User

__all__ = ["Todo", "User"]
