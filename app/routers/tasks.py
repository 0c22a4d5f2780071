"""Task resource handlers, shared by the public and the agent-facing route groups."""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import Any, Optional, Sequence

from sqlmodel import Session

from app.db.config import get_session
from app.exceptions import TaskValidationError
from app.models.task import Task
from app.schemas.task import (
    MessageEnvelope,
    TaskEnvelope,
    TaskListEnvelope,
    TaskResponse,
    ValidationErrorEnvelope,
)
from app.services.task_service import TaskService
from app.services.task_validator import BODY_FIELD, TaskValidator

TASK_NOT_FOUND_MESSAGE = "Task not found."
MAX_TASK_ID = 2**63 - 1

NOT_FOUND_RESPONSE = {404: {"model": MessageEnvelope, "description": "Task not found"}}
INVALID_RESPONSE = {422: {"model": ValidationErrorEnvelope, "description": "Invalid task data"}}


async def read_json_body(request: Request) -> Any:
    """
    Decode the request body inside the handler, after every dependency has run.

    An empty body reads as an empty object; undecodable JSON is a validation error.
    """
    body_bytes = await request.body()
    if not body_bytes.strip():
        return {}

    try:
        return await request.json()
    except ValueError:
        raise TaskValidationError({BODY_FIELD: ["The request body must be valid JSON."]})


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Dependency for getting TaskService instance."""
    return TaskService(session)


def parse_task_id(raw: str) -> Optional[int]:
    """Convert a path segment to a task id; None for anything that cannot name a task."""
    if not raw.isascii() or not raw.isdigit():
        return None
    task_id = int(raw)
    if task_id > MAX_TASK_ID:
        return None
    return task_id


def get_task_or_404(task_id: str, service: TaskService = Depends(get_task_service)) -> Task:
    """Resolve the {task_id} path segment before the handler body runs."""
    parsed = parse_task_id(task_id)
    task = service.find(parsed) if parsed is not None else None
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=TASK_NOT_FOUND_MESSAGE
        )
    return task


async def list_tasks(service: TaskService = Depends(get_task_service)):
    """List every task, most recently created first."""
    tasks = service.list_all()
    return {
        "success": True,
        "data": [TaskResponse.model_validate(task) for task in tasks],
    }


async def create_task(
    request: Request,
    service: TaskService = Depends(get_task_service),
):
    """Create a new task."""
    payload = await read_json_body(request)
    result = TaskValidator.validate_create(payload)
    if not result["valid"]:
        raise TaskValidationError(result["errors"])

    task = service.insert(result["data"])
    return {
        "success": True,
        "data": TaskResponse.model_validate(task),
        "message": "Task created successfully.",
    }


async def show_task(task: Task = Depends(get_task_or_404)):
    """Get a specific task by ID."""
    return {
        "success": True,
        "data": TaskResponse.model_validate(task),
    }


async def update_task(
    request: Request,
    task: Task = Depends(get_task_or_404),
    service: TaskService = Depends(get_task_service),
):
    """Update any subset of title, description and status."""
    payload = await read_json_body(request)
    result = TaskValidator.validate_update(payload)
    if not result["valid"]:
        raise TaskValidationError(result["errors"])

    updated = service.update(task.id, result["data"])
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=TASK_NOT_FOUND_MESSAGE
        )
    return {
        "success": True,
        "data": TaskResponse.model_validate(updated),
        "message": "Task updated successfully.",
    }


async def delete_task(
    task: Task = Depends(get_task_or_404),
    service: TaskService = Depends(get_task_service),
):
    """Delete a task."""
    if not service.delete(task.id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=TASK_NOT_FOUND_MESSAGE
        )
    return {
        "success": True,
        "message": "Task deleted successfully.",
    }


def build_task_router(name_prefix: str = "", dependencies: Optional[Sequence[Any]] = None) -> APIRouter:
    """
    Register the five task operations on a new router.

    Args:
        name_prefix: Prefix for route names, e.g. "mcp." for the agent surface
        dependencies: Dependencies run before every route, e.g. the API key guard

    Returns:
        APIRouter exposing /tasks and /tasks/{task_id}
    """
    router = APIRouter(tags=["Tasks"], dependencies=list(dependencies or []))
    common = {"response_model_exclude_unset": True}

    router.add_api_route(
        "/tasks", list_tasks, methods=["GET"],
        response_model=TaskListEnvelope, name=f"{name_prefix}tasks.index", **common,
    )
    router.add_api_route(
        "/tasks", create_task, methods=["POST"],
        response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED,
        responses=INVALID_RESPONSE, name=f"{name_prefix}tasks.store", **common,
    )
    router.add_api_route(
        "/tasks/{task_id}", show_task, methods=["GET"],
        response_model=TaskEnvelope, responses=NOT_FOUND_RESPONSE,
        name=f"{name_prefix}tasks.show", **common,
    )
    router.add_api_route(
        "/tasks/{task_id}", update_task, methods=["PUT", "PATCH"],
        response_model=TaskEnvelope, responses={**NOT_FOUND_RESPONSE, **INVALID_RESPONSE},
        name=f"{name_prefix}tasks.update", **common,
    )
    router.add_api_route(
        "/tasks/{task_id}", delete_task, methods=["DELETE"],
        response_model=MessageEnvelope, responses=NOT_FOUND_RESPONSE,
        name=f"{name_prefix}tasks.destroy", **common,
    )
    return router
