"""Repository implementations."""

from .sqlalchemy_user_repository import SQLAlchemyUserRepository
from .sqlalchemy_todo_repository import SQLAlchemyTodoRepository

__all__ = ["SQLAlchemyUserRepository", "SQLAlchemyTodoRepository"]
