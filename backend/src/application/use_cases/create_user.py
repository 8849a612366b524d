"""Use Case for registering a user."""

from typing import Optional

from application.dtos import CreateUserParam, UserDto
from domain.entities import User
from domain.repositories import IUserRepository
from domain.value_objects import Email, Username
from infrastructure.config import Logger, build_error_context, get_logger


class CreateUserUseCase:
    """Validate email and name, create a user and persist it."""
    
    def __init__(self, user_repository: IUserRepository, logger: Optional[Logger] = None):
        self.user_repo = user_repository
        self.logger = logger if logger is not None else get_logger(self.__class__.__name__)
    
    async def execute(self, param: CreateUserParam) -> UserDto:
        """
        Create a user.
        
        Raises:
            ValidationError: If email or name is invalid (nothing is saved)
        """
        self.logger.info("Creating user", {"email": param.email, "name": param.name})
        
        try:
            user = User.create(Email.from_value(param.email), Username.from_value(param.name))
            
            await self.user_repo.save(user)
            
            self.logger.info("User created", {
                "user_id": user.id.value,
                "email": user.email.value,
            })
            return UserDto.from_entity(user)
            
        except Exception as e:
            self.logger.error("Failed to create user", {
                "email": param.email,
                "name": param.name,
                **build_error_context(e),
            })
            raise
