"""Use Case for creating a todo."""

from typing import Optional

from application.dtos import CreateTodoParam, TodoDto
from domain.entities import Todo
from domain.repositories import ITodoRepository
from domain.value_objects import TodoBody, TodoTitle, UserId
from infrastructure.config import Logger, build_error_context, get_logger


class CreateTodoUseCase:
    """Validate the input, create a NOT_STARTED todo and persist it."""
    
    def __init__(self, todo_repository: ITodoRepository, logger: Optional[Logger] = None):
        self.todo_repo = todo_repository
        self.logger = logger if logger is not None else get_logger(self.__class__.__name__)
    
    async def execute(self, param: CreateTodoParam) -> TodoDto:
        """
        Create a todo.
        
        Raises:
            ValidationError: If any input field is invalid (nothing is saved)
        """
        self.logger.info("Creating todo", {
            "user_id": param.user_id,
            "title": param.title,
            "has_body": param.body is not None,
        })
        
        try:
            todo = Todo.create(
                UserId.from_value(param.user_id),
                TodoTitle.from_value(param.title),
                TodoBody.from_value(param.body) if param.body is not None else None,
            )
            
            await self.todo_repo.save(todo)
            
            self.logger.info("Todo created", {
                "todo_id": todo.id.value,
                "user_id": todo.user_id.value,
                "title": todo.title.value,
            })
            return TodoDto.from_entity(todo)
            
        except Exception as e:
            self.logger.error("Failed to create todo", {
                "user_id": param.user_id,
                "title": param.title,
                **build_error_context(e),
            })
            raise
