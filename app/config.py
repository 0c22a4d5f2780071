"""Application settings for the Task API."""
from pydantic import BaseModel, field_validator
from dotenv import load_dotenv
import os

# Load environment variables from a local .env file if one exists
load_dotenv()


class Settings(BaseModel):
    """Runtime configuration, built once and passed to the components that need it."""

    database_url: str = "sqlite:///./task_api.db"
    mcp_api_key: str = ""  # services.mcp.api_key; empty rejects every agent request
    api_prefix: str = ""
    environment: str = "development"
    frontend_url: str = "http://localhost:3000"
    log_level: str = "INFO"

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = "/" + value
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        defaults = cls()
        return cls(
            database_url=os.environ.get("DATABASE_URL", defaults.database_url),
            mcp_api_key=os.environ.get("MCP_API_KEY", defaults.mcp_api_key),
            api_prefix=os.environ.get("API_PREFIX", defaults.api_prefix),
            environment=os.environ.get("ENVIRONMENT", defaults.environment),
            frontend_url=os.environ.get("FRONTEND_URL", defaults.frontend_url),
            log_level=os.environ.get("LOG_LEVEL", defaults.log_level),
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
