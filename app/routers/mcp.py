"""Agent-facing (MCP) route group, gated by the API key guard."""
from fastapi import APIRouter, Depends

from app.middleware.api_key import McpApiKeyGuard
from app.routers.tasks import build_task_router
from app.schemas.task import MessageEnvelope

UNAUTHORIZED_RESPONSE = {401: {"model": MessageEnvelope, "description": "Invalid or missing MCP API key"}}


async def mcp_health():
    """Lets an agent verify its credential."""
    return {
        "success": True,
        "message": "MCP API key is valid.",
    }


def build_mcp_router(guard: McpApiKeyGuard) -> APIRouter:
    """Mount the shared task operations plus /health behind the guard."""
    router = APIRouter(
        prefix="/mcp",
        tags=["MCP"],
        dependencies=[Depends(guard)],
        responses=UNAUTHORIZED_RESPONSE,
    )
    router.add_api_route(
        "/health", mcp_health, methods=["GET"],
        response_model=MessageEnvelope, name="mcp.health",
    )
    router.include_router(build_task_router(name_prefix="mcp."))
    return router
