"""Database infrastructure module."""

from .session import Base, get_engine, get_session, init_db, close_db
from .models import UserModel, TodoModel

__all__ = [
    "Base",
    "get_engine",
    "get_session",
    "init_db",
    "close_db",
    "UserModel",
    "TodoModel",
]
