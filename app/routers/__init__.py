"""Routers package for the Task API."""

from .mcp import build_mcp_router
from .tasks import build_task_router

__all__ = ["build_mcp_router", "build_task_router"]
