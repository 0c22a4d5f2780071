"""Task schemas for request validation and API responses."""
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from datetime import datetime
from typing import Annotated, List, Optional

from app.models.task import TaskStatus

TITLE_MAX_LENGTH = 255

# Surrounding whitespace is trimmed before the length checks run
TitleStr = Annotated[
    str,
    StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH),
]
DescriptionStr = Annotated[str, StringConstraints(strict=True)]


class TaskCreate(BaseModel):
    """Schema for creating a task."""
    model_config = ConfigDict(extra="ignore")

    title: TitleStr
    description: Optional[DescriptionStr] = None
    status: TaskStatus = TaskStatus.PENDING


class TaskUpdate(BaseModel):
    """
    Schema for partially updating a task.

    Defaults are never validated, so an absent field passes while an explicit
    null for title or status fails like any other invalid value.
    """
    model_config = ConfigDict(extra="ignore")

    title: TitleStr = None
    description: Optional[DescriptionStr] = None
    status: TaskStatus = None


class TaskResponse(BaseModel):
    """Schema for task API responses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str]
    status: TaskStatus
    created_at: datetime
    updated_at: datetime


class TaskEnvelope(BaseModel):
    """Response envelope carrying a single task."""
    success: bool = True
    data: Optional[TaskResponse] = None
    message: Optional[str] = None


class TaskListEnvelope(BaseModel):
    """Response envelope carrying every task."""
    success: bool = True
    data: List[TaskResponse] = Field(default_factory=list)


class MessageEnvelope(BaseModel):
    """Response envelope carrying only a message."""
    success: bool = True
    message: Optional[str] = None


class ValidationErrorEnvelope(BaseModel):
    """Response envelope for rejected input."""
    success: bool = False
    message: str
    errors: dict[str, List[str]]
