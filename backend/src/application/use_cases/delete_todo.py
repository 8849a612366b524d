"""Use Case for deleting a todo."""

from typing import Optional

from application.dtos import DeleteTodoParam
from domain.repositories import ITodoRepository
from domain.value_objects import TodoId
from infrastructure.config import Logger, build_error_context, get_logger


class DeleteTodoUseCase:
    """Delete a todo by id; missing ids are reported by the repository."""
    
    def __init__(self, todo_repository: ITodoRepository, logger: Optional[Logger] = None):
        self.todo_repo = todo_repository
        self.logger = logger if logger is not None else get_logger(self.__class__.__name__)
    
    async def execute(self, param: DeleteTodoParam) -> None:
        self.logger.info("Deleting todo", {"todo_id": param.todo_id})
        
        try:
            await self.todo_repo.delete(TodoId.from_value(param.todo_id))
            self.logger.info("Todo deleted", {"todo_id": param.todo_id})
            
        except Exception as e:
            self.logger.error("Failed to delete todo", {
                "todo_id": param.todo_id,
                **build_error_context(e),
            })
            raise
