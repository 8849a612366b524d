"""Pydantic schemas for request/response validation."""

from .common_schemas import ErrorResponse, HealthResponse
from .todo_schemas import CreateTodoRequest, TodoResponse, UpdateTodoRequest
from .user_schemas import CreateUserRequest, UpdateUserRequest, UserResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "CreateTodoRequest",
    "UpdateTodoRequest",
    "TodoResponse",
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
]
