"""Domain Enums - Constant values used across the domain."""

from .todo_status import TodoStatus

__all__ = ["TodoStatus"]
