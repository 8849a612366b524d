"""SQLAlchemy implementation of user repository."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import User
from domain.entities.timestamps import ensure_utc
from domain.exceptions import NotFoundError
from domain.repositories import IUserRepository
from domain.value_objects import Email, UserId, Username
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(IUserRepository):
    """Concrete implementation of IUserRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def find(self, user_id: UserId) -> Optional[User]:
        """Retrieve a user by ID."""
        model = await self._get_model(user_id.value)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def save(self, user: User) -> None:
        """Insert the user or overwrite the stored row with the same ID."""
        model = await self._get_model(user.id.value)
        
        if model is None:
            self.session.add(self._entity_to_model(user))
        else:
            self._update_model_from_entity(model, user)
        
        await self.session.flush()
    
    async def delete(self, user_id: UserId) -> None:
        """Delete a user, raising NotFoundError if no row exists."""
        model = await self._get_model(user_id.value)
        
        if model is None:
            raise NotFoundError("User", user_id.value)
        
        await self.session.delete(model)
        await self.session.flush()
    
    async def _get_model(self, user_id: str) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _entity_to_model(self, entity: User) -> UserModel:
        """Convert domain entity to ORM model."""
        return UserModel(
            id=entity.id.value,
            email=entity.email.value,
            name=entity.name.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
    
    def _update_model_from_entity(self, model: UserModel, entity: User) -> None:
        """Update ORM model from domain entity (created_at is never rewritten)."""
        model.email = entity.email.value
        model.name = entity.name.value
        model.updated_at = entity.updated_at
    
    def _model_to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User.reconstruct(
            id=UserId.from_value(model.id),
            email=Email.from_value(model.email),
            name=Username.from_value(model.name),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
