"""Unit tests for the MCP API key guard."""

import asyncio

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from app.middleware.api_key import (
    INVALID_API_KEY_MESSAGE,
    McpApiKeyGuard,
    extract_api_key,
)


def build_request(headers=None, method="GET", path="/mcp/tasks"):
    """Minimal ASGI request carrying the given headers."""
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    return Request({
        "type": "http",
        "method": method,
        "path": path,
        "query_string": b"",
        "headers": raw_headers,
    })


class TestExtractApiKey:

    def test_no_credential(self):
        assert extract_api_key(build_request()) is None

    def test_custom_header(self):
        assert extract_api_key(build_request({"X-AI-Agent-Api-Key": "abc"})) == "abc"

    def test_bearer_token(self):
        assert extract_api_key(build_request({"Authorization": "Bearer abc"})) == "abc"

    def test_bearer_scheme_is_case_insensitive(self):
        assert extract_api_key(build_request({"Authorization": "bearer abc"})) == "abc"

    def test_other_schemes_are_ignored(self):
        assert extract_api_key(build_request({"Authorization": "Basic abc"})) is None

    def test_header_takes_precedence_over_bearer(self):
        request = build_request({"X-AI-Agent-Api-Key": "header", "Authorization": "Bearer token"})

        assert extract_api_key(request) == "header"

    def test_empty_header_still_takes_precedence(self):
        request = build_request({"X-AI-Agent-Api-Key": "", "Authorization": "Bearer token"})

        assert extract_api_key(request) == ""


class TestMcpApiKeyGuard:

    def test_exact_match_is_authorized(self):
        assert McpApiKeyGuard("secret").is_authorized("secret") is True

    @pytest.mark.parametrize("provided", [None, "", "Secret", "secret ", "secre"])
    def test_anything_else_is_rejected(self, provided):
        assert McpApiKeyGuard("secret").is_authorized(provided) is False

    @pytest.mark.parametrize("provided", [None, ""])
    def test_unconfigured_key_rejects_everything(self, provided):
        assert McpApiKeyGuard("").is_authorized(provided) is False

    def test_call_passes_authorized_request(self):
        guard = McpApiKeyGuard("secret")

        assert asyncio.run(guard(build_request({"X-AI-Agent-Api-Key": "secret"}))) is None

    def test_call_raises_401_for_rejected_request(self):
        guard = McpApiKeyGuard("secret")

        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(guard(build_request({"X-AI-Agent-Api-Key": "wrong"})))

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == INVALID_API_KEY_MESSAGE
