"""FastAPI dependency injection setup."""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from application.use_cases import (
    CreateTodoUseCase,
    CreateUserUseCase,
    DeleteTodoUseCase,
    DeleteUserUseCase,
    UpdateTodoUseCase,
    UpdateUserUseCase,
)
from domain.repositories import ITodoRepository, IUserRepository
from infrastructure.database import get_session
from infrastructure.database.repositories import (
    SQLAlchemyTodoRepository,
    SQLAlchemyUserRepository,
)


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Repository dependencies
def get_todo_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ITodoRepository:
    """Get todo repository dependency."""
    return SQLAlchemyTodoRepository(session)


def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IUserRepository:
    """Get user repository dependency."""
    return SQLAlchemyUserRepository(session)


# Use case dependencies
def get_create_todo_use_case(
    repository: ITodoRepository = Depends(get_todo_repository),
) -> CreateTodoUseCase:
    return CreateTodoUseCase(repository)


def get_update_todo_use_case(
    repository: ITodoRepository = Depends(get_todo_repository),
) -> UpdateTodoUseCase:
    return UpdateTodoUseCase(repository)


def get_delete_todo_use_case(
    repository: ITodoRepository = Depends(get_todo_repository),
) -> DeleteTodoUseCase:
    return DeleteTodoUseCase(repository)


def get_create_user_use_case(
    repository: IUserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    return CreateUserUseCase(repository)


def get_update_user_use_case(
    repository: IUserRepository = Depends(get_user_repository),
) -> UpdateUserUseCase:
    return UpdateUserUseCase(repository)


def get_delete_user_use_case(
    repository: IUserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    return DeleteUserUseCase(repository)
