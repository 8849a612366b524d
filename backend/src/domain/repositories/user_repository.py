"""User repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import User
from domain.value_objects import UserId


class IUserRepository(ABC):
    """
    Abstract repository interface for User entity.
    
    This interface defines the contract for user persistence.
    Concrete implementations will be in the infrastructure layer.
    """
    
    @abstractmethod
    async def find(self, user_id: UserId) -> Optional[User]:
        """
        Retrieve a user by ID.
        
        Args:
            user_id: User identifier
            
        Returns:
            User if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Insert the user, or overwrite the stored one with the same ID.
        
        Args:
            user: User entity to persist
        """
        pass
    
    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """
        Delete a user.
        
        Args:
            user_id: User identifier
            
        Raises:
            NotFoundError: If the implementation reports missing rows
        """
        pass
