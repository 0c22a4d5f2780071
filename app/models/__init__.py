"""Database models for the Task API."""

from .task import Task, TaskStatus

__all__ = ["Task", "TaskStatus"]
