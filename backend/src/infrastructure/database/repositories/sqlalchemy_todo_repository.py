"""SQLAlchemy implementation of todo repository."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Todo
from domain.entities.timestamps import ensure_utc
from domain.enums import TodoStatus
from domain.exceptions import NotFoundError
from domain.repositories import ITodoRepository
from domain.value_objects import TodoBody, TodoId, TodoTitle, UserId
from infrastructure.database.models import TodoModel


class SQLAlchemyTodoRepository(ITodoRepository):
    """Concrete implementation of ITodoRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def find(self, todo_id: TodoId) -> Optional[Todo]:
        """Retrieve a todo by ID."""
        model = await self._get_model(todo_id.value)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def save(self, todo: Todo) -> None:
        """Insert the todo or overwrite the stored row with the same ID."""
        model = await self._get_model(todo.id.value)
        
        if model is None:
            self.session.add(self._entity_to_model(todo))
        else:
            self._update_model_from_entity(model, todo)
        
        await self.session.flush()
    
    async def delete(self, todo_id: TodoId) -> None:
        """Delete a todo, raising NotFoundError if no row exists."""
        model = await self._get_model(todo_id.value)
        
        if model is None:
            raise NotFoundError("Todo", todo_id.value)
        
        await self.session.delete(model)
        await self.session.flush()
    
    async def _get_model(self, todo_id: str) -> Optional[TodoModel]:
        stmt = select(TodoModel).where(TodoModel.id == todo_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _entity_to_model(self, entity: Todo) -> TodoModel:
        """Convert domain entity to ORM model."""
        return TodoModel(
            id=entity.id.value,
            user_id=entity.user_id.value,
            title=entity.title.value,
            body=None if entity.body.is_empty() else entity.body.value,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
    
    def _update_model_from_entity(self, model: TodoModel, entity: Todo) -> None:
        """Update ORM model from domain entity (created_at is never rewritten)."""
        model.user_id = entity.user_id.value
        model.title = entity.title.value
        model.body = None if entity.body.is_empty() else entity.body.value
        model.status = entity.status.value
        model.updated_at = entity.updated_at
    
    def _model_to_entity(self, model: TodoModel) -> Todo:
        """Convert ORM model to domain entity."""
        body = TodoBody.from_value(model.body) if model.body else TodoBody.empty()
        
        return Todo.reconstruct(
            id=TodoId.from_value(model.id),
            user_id=UserId.from_value(model.user_id),
            title=TodoTitle.from_value(model.title),
            body=body,
            status=TodoStatus(model.status),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
