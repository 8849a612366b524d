"""Domain Repository Interfaces - Abstract definitions."""

from .user_repository import IUserRepository
from .todo_repository import ITodoRepository

__all__ = ["IUserRepository", "ITodoRepository"]
