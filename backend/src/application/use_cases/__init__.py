"""Application use cases - one class per command."""

from .create_todo import CreateTodoUseCase
from .update_todo import UpdateTodoUseCase
from .delete_todo import DeleteTodoUseCase
from .create_user import CreateUserUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase

__all__ = [
    "CreateTodoUseCase",
    "UpdateTodoUseCase",
    "DeleteTodoUseCase",
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
]
