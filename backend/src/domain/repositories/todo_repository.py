"""Todo repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Todo
from domain.value_objects import TodoId


class ITodoRepository(ABC):
    """
    Abstract repository interface for Todo entity.
    
    This interface defines the contract for todo persistence.
    Concrete implementations will be in the infrastructure layer.
    """
    
    @abstractmethod
    async def find(self, todo_id: TodoId) -> Optional[Todo]:
        """
        Retrieve a todo by ID.
        
        Args:
            todo_id: Todo identifier
            
        Returns:
            Todo if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def save(self, todo: Todo) -> None:
        """
        Insert the todo, or overwrite the stored one with the same ID.
        
        Args:
            todo: Todo entity to persist
        """
        pass
    
    @abstractmethod
    async def delete(self, todo_id: TodoId) -> None:
        """
        Delete a todo.
        
        Args:
            todo_id: Todo identifier
            
        Raises:
            NotFoundError: If the implementation reports missing rows
        """
        pass
