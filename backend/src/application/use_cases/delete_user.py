"""Use Case for deleting a user."""

from typing import Optional

from application.dtos import DeleteUserParam
from domain.repositories import IUserRepository
from domain.value_objects import UserId
from infrastructure.config import Logger, build_error_context, get_logger


class DeleteUserUseCase:
    """Delete a user by id; missing ids are reported by the repository."""
    
    def __init__(self, user_repository: IUserRepository, logger: Optional[Logger] = None):
        self.user_repo = user_repository
        self.logger = logger if logger is not None else get_logger(self.__class__.__name__)
    
    async def execute(self, param: DeleteUserParam) -> None:
        self.logger.info("Deleting user", {"user_id": param.user_id})
        
        try:
            await self.user_repo.delete(UserId.from_value(param.user_id))
            self.logger.info("User deleted", {"user_id": param.user_id})
            
        except Exception as e:
            self.logger.error("Failed to delete user", {
                "user_id": param.user_id,
                **build_error_context(e),
            })
            raise
