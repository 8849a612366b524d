"""Use Case for partially updating a user."""

from typing import Optional

from application.dtos import UpdateUserParam, UserDto
from domain.exceptions import NotFoundError
from domain.repositories import IUserRepository
from domain.value_objects import Email, UserId, Username
from infrastructure.config import Logger, build_error_context, get_logger


class UpdateUserUseCase:
    """Apply the provided fields to an existing user and persist the result."""
    
    def __init__(self, user_repository: IUserRepository, logger: Optional[Logger] = None):
        self.user_repo = user_repository
        self.logger = logger if logger is not None else get_logger(self.__class__.__name__)
    
    async def execute(self, param: UpdateUserParam) -> UserDto:
        """
        Update a user.
        
        Raises:
            ValidationError: If any provided field is invalid
            NotFoundError: If no user has the given id
        """
        self.logger.info("Updating user", {
            "user_id": param.user_id,
            "email": param.email,
            "name": param.name,
        })
        
        try:
            user_id = UserId.from_value(param.user_id)
            email = Email.from_value(param.email) if param.email is not None else None
            name = Username.from_value(param.name) if param.name is not None else None
            
            user = await self.user_repo.find(user_id)
            if user is None:
                raise NotFoundError("User", param.user_id)
            
            if email is not None:
                user = user.change_email(email)
            if name is not None:
                user = user.change_name(name)
            
            await self.user_repo.save(user)
            
            self.logger.info("User updated", {
                "user_id": user.id.value,
                "email": user.email.value,
            })
            return UserDto.from_entity(user)
            
        except Exception as e:
            self.logger.error("Failed to update user", {
                "user_id": param.user_id,
                "email": param.email,
                "name": param.name,
                **build_error_context(e),
            })
            raise
