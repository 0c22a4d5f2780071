"""Exceptions and their JSON envelope renderings."""
from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.services.task_validator import format_validation_errors

VALIDATION_FAILED_MESSAGE = "The given data was invalid."


class TaskValidationError(Exception):
    """Raised when a request body violates the task field rules."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__(VALIDATION_FAILED_MESSAGE)


def create_error_response(status_code: int, message: str, **extra) -> JSONResponse:
    """Standardized failure envelope."""
    content = {"success": False, "message": message}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


async def task_validation_exception_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    return create_error_response(422, VALIDATION_FAILED_MESSAGE, errors=exc.errors)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return create_error_response(
        422,
        VALIDATION_FAILED_MESSAGE,
        errors=format_validation_errors(exc.errors()),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = create_error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Render every handled error with the {success, message} envelope."""
    app.add_exception_handler(TaskValidationError, task_validation_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
