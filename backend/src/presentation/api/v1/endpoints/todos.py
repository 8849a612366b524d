"""Todo endpoints."""

from fastapi import APIRouter, Depends, Response, status

from application.dtos import CreateTodoParam, DeleteTodoParam, UpdateTodoParam
from application.use_cases import CreateTodoUseCase, DeleteTodoUseCase, UpdateTodoUseCase
from presentation.api.v1.dependencies import (
    get_create_todo_use_case,
    get_delete_todo_use_case,
    get_update_todo_use_case,
)
from presentation.schemas import CreateTodoRequest, TodoResponse, UpdateTodoRequest

router = APIRouter(prefix="/todos", tags=["todos"])


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
async def create_todo(
    request: CreateTodoRequest,
    use_case: CreateTodoUseCase = Depends(get_create_todo_use_case),
) -> TodoResponse:
    """Create a todo in the NOT_STARTED state."""
    result = await use_case.execute(
        CreateTodoParam(user_id=request.user_id, title=request.title, body=request.body)
    )
    return TodoResponse.model_validate(result)


@router.patch("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: str,
    request: UpdateTodoRequest,
    use_case: UpdateTodoUseCase = Depends(get_update_todo_use_case),
) -> TodoResponse:
    """Update the provided fields of a todo."""
    result = await use_case.execute(
        UpdateTodoParam(
            todo_id=todo_id,
            title=request.title,
            body=request.body,
            status=request.status,
        )
    )
    return TodoResponse.model_validate(result)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: str,
    use_case: DeleteTodoUseCase = Depends(get_delete_todo_use_case),
) -> Response:
    """Delete a todo."""
    await use_case.execute(DeleteTodoParam(todo_id=todo_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
