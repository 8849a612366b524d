"""SQLAlchemy ORM models."""

from .user_model import UserModel
from .todo_model import TodoModel

__all__ = ["UserModel", "TodoModel"]
