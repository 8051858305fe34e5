from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_create_todo, get_delete_todo, get_get_todos, get_update_todo
from ..schemas import (
    ErrorResponse,
    MessageResponse,
    TodoCreate,
    TodoListResponse,
    TodoOut,
    TodoResponse,
    TodoUpdate,
)
from ..use_cases import CreateTodoUseCase, DeleteTodoUseCase, GetTodosUseCase, UpdateTodoUseCase
from ..utils import collection_envelope

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)

TODO_NOT_FOUND = "Todo not found"


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=TodoListResponse,
    summary="List Todos",
    description="Return every todo together with the total count.",
    responses={
        200: {"description": "List retrieved successfully"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
def list_todos(use_case: GetTodosUseCase = Depends(get_get_todos)) -> TodoListResponse:
    """
    List all todos.
    """
    todos = [TodoOut(**t) for t in use_case.execute()]
    return TodoListResponse(**collection_envelope(todos))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item from trimmed, non-empty text and return it.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"model": ErrorResponse, "description": "Text missing or empty"},
    },
)
def create_todo(
    payload: TodoCreate,
    use_case: CreateTodoUseCase = Depends(get_create_todo),
) -> TodoResponse:
    """
    Create a new Todo.
    """
    created = use_case.execute(payload.model_dump(exclude_unset=True))
    return TodoResponse(data=TodoOut(**created))


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Update Todo",
    description=(
        "Partially update a Todo item. Only fields present in the body are changed; "
        "a present but blank text is rejected."
    ),
    responses={
        200: {"description": "Todo updated"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Todo not found"},
    },
)
def patch_todo(
    todo_id: str,
    payload: TodoUpdate,
    use_case: UpdateTodoUseCase = Depends(get_update_todo),
) -> TodoResponse:
    """
    Partial update of a Todo item.
    """
    updated = use_case.execute(todo_id, payload.model_dump(exclude_unset=True))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)
    return TodoResponse(data=TodoOut(**updated))


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=MessageResponse,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        200: {"description": "Todo deleted"},
        404: {"model": ErrorResponse, "description": "Todo not found"},
    },
)
def delete_todo(
    todo_id: str,
    use_case: DeleteTodoUseCase = Depends(get_delete_todo),
) -> MessageResponse:
    """
    Delete a Todo. Returns 404 if not found.
    """
    if not use_case.execute(todo_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)
    return MessageResponse(message="Todo deleted successfully")
