"""User endpoints."""

from fastapi import APIRouter, Depends, Response, status

from application.dtos import CreateUserParam, DeleteUserParam, UpdateUserParam
from application.use_cases import CreateUserUseCase, DeleteUserUseCase, UpdateUserUseCase
from presentation.api.v1.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_update_user_use_case,
)
from presentation.schemas import CreateUserRequest, UpdateUserRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Register a user."""
    result = await use_case.execute(CreateUserParam(email=request.email, name=request.name))
    return UserResponse.model_validate(result)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    """Update the provided fields of a user."""
    result = await use_case.execute(
        UpdateUserParam(user_id=user_id, email=request.email, name=request.name)
    )
    return UserResponse.model_validate(result)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> Response:
    """Delete a user."""
    await use_case.execute(DeleteUserParam(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
