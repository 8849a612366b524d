"""Use Case for partially updating a todo."""

from typing import Optional

from application.dtos import TodoDto, UpdateTodoParam
from domain.enums import TodoStatus
from domain.exceptions import NotFoundError
from domain.repositories import ITodoRepository
from domain.value_objects import TodoBody, TodoId, TodoTitle
from infrastructure.config import Logger, build_error_context, get_logger


class UpdateTodoUseCase:
    """Apply the provided fields to an existing todo and persist the result."""
    
    def __init__(self, todo_repository: ITodoRepository, logger: Optional[Logger] = None):
        self.todo_repo = todo_repository
        self.logger = logger if logger is not None else get_logger(self.__class__.__name__)
    
    async def execute(self, param: UpdateTodoParam) -> TodoDto:
        """
        Update a todo.
        
        Raises:
            ValidationError: If any provided field is invalid
            NotFoundError: If no todo has the given id
        """
        self.logger.info("Updating todo", {
            "todo_id": param.todo_id,
            "title": param.title,
            "has_body": param.body is not None,
            "status": param.status,
        })
        
        try:
            # Convert every provided field before touching the repository
            todo_id = TodoId.from_value(param.todo_id)
            title = TodoTitle.from_value(param.title) if param.title is not None else None
            body = None
            if param.body is not None:
                body = TodoBody.empty() if param.body == "" else TodoBody.from_value(param.body)
            status = TodoStatus.from_value(param.status) if param.status is not None else None
            
            todo = await self.todo_repo.find(todo_id)
            if todo is None:
                raise NotFoundError("Todo", param.todo_id)
            
            if title is not None:
                todo = todo.change_title(title)
            if body is not None:
                todo = todo.change_body(body)
            if status is not None:
                todo = todo.change_status(status)
            
            await self.todo_repo.save(todo)
            
            self.logger.info("Todo updated", {
                "todo_id": todo.id.value,
                "user_id": todo.user_id.value,
                "title": todo.title.value,
            })
            return TodoDto.from_entity(todo)
            
        except Exception as e:
            self.logger.error("Failed to update todo", {
                "todo_id": param.todo_id,
                "title": param.title,
                "status": param.status,
                **build_error_context(e),
            })
            raise
