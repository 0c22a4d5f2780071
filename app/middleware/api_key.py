"""API key guard for the agent-facing (MCP) routes."""
from fastapi import HTTPException, Request, status
from typing import Optional

from app.utils.logger import get_logger

logger = get_logger(__name__)

MCP_API_KEY_HEADER = "X-AI-Agent-Api-Key"
INVALID_API_KEY_MESSAGE = "Invalid or missing MCP API key."


def extract_api_key(request: Request) -> Optional[str]:
    """
    Read the credential presented by the client.

    The X-AI-Agent-Api-Key header wins whenever it is present, even when
    empty; otherwise the token of an "Authorization: Bearer" header is used.

    Args:
        request: FastAPI request object

    Returns:
        The presented credential, or None if the client sent none
    """
    header_key = request.headers.get(MCP_API_KEY_HEADER)
    if header_key is not None:
        return header_key

    auth_header = request.headers.get("authorization")
    if not auth_header:
        return None

    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token


class McpApiKeyGuard:
    """Dependency rejecting requests whose credential does not match the configured key."""

    def __init__(self, api_key: str):
        self.api_key = api_key or ""

    def is_authorized(self, provided: Optional[str]) -> bool:
        # An unconfigured key locks the agent surface instead of opening it
        if self.api_key == "":
            return False
        return provided == self.api_key

    async def __call__(self, request: Request) -> None:
        if self.is_authorized(extract_api_key(request)):
            return

        logger.warning(
            "MCP API key rejected",
            method=request.method,
            path=request.url.path,
            key_configured=self.api_key != "",
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_API_KEY_MESSAGE,
        )
