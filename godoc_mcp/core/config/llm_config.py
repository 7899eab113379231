"""LLM backend configuration for godoc-mcp.

The backend is any OpenAI-compatible chat-completion endpoint. OpenRouter is
the default, authenticated with OPENROUTER_API_KEY.
"""

import argparse
import os
from typing import Any

from pydantic import BaseModel, Field, SecretStr, field_validator

from godoc_mcp.core.models import DEFAULT_MODEL

CREDENTIAL_ENV = "OPENROUTER_API_KEY"
DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_REFERER = "https://github.com/herlon214/godoc-mcp"
DEFAULT_TITLE = "GoDoc MCP"


class LLMConfig(BaseModel):
    """Backend configuration.

    Configuration can be provided via:
    - Environment variables (OPENROUTER_API_KEY, GODOC_MCP__LLM__*)
    - CLI arguments
    - Default values
    """

    api_key: SecretStr | None = Field(
        default=None, description="Credential for the completion backend"
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="OpenAI-compatible API base URL"
    )
    model: str = Field(
        default=DEFAULT_MODEL, description="Default model identifier"
    )
    timeout: float = Field(
        default=60.0, gt=0, description="Backend request timeout in seconds"
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        description="Client-level retries (0 = fail on first error)",
    )
    referer: str = Field(
        default=DEFAULT_REFERER, description="HTTP-Referer attribution header"
    )
    title: str = Field(default=DEFAULT_TITLE, description="X-Title attribution header")

    @field_validator("base_url")
    def validate_base_url(cls, v: str) -> str:
        """Strip trailing slashes so path joins stay predictable."""
        v = v.strip()
        if not v:
            raise ValueError("base_url must not be empty")
        return v.rstrip("/")

    def is_configured(self) -> bool:
        """Check whether a credential is present."""
        return self.api_key is not None and bool(self.api_key.get_secret_value())

    def default_headers(self) -> dict[str, str]:
        return {"HTTP-Referer": self.referer, "X-Title": self.title}

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add LLM-related CLI arguments."""
        parser.add_argument(
            "--llm-model",
            help=f"Backend model identifier (default: {DEFAULT_MODEL})",
        )
        parser.add_argument(
            "--llm-base-url",
            help=f"OpenAI-compatible API base URL (default: {DEFAULT_BASE_URL})",
        )
        parser.add_argument(
            "--llm-timeout",
            type=float,
            help="Backend request timeout in seconds",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load LLM config from environment variables."""
        config: dict[str, Any] = {}
        if api_key := (
            os.getenv("GODOC_MCP__LLM__API_KEY") or os.getenv(CREDENTIAL_ENV)
        ):
            config["api_key"] = api_key
        if base_url := os.getenv("GODOC_MCP__LLM__BASE_URL"):
            config["base_url"] = base_url
        if model := os.getenv("GODOC_MCP__LLM__MODEL"):
            config["model"] = model
        if timeout := os.getenv("GODOC_MCP__LLM__TIMEOUT"):
            config["timeout"] = float(timeout)
        if max_retries := os.getenv("GODOC_MCP__LLM__MAX_RETRIES"):
            config["max_retries"] = int(max_retries)
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract LLM config from CLI arguments."""
        overrides: dict[str, Any] = {}
        if getattr(args, "llm_model", None):
            overrides["model"] = args.llm_model
        if getattr(args, "llm_base_url", None):
            overrides["base_url"] = args.llm_base_url
        if getattr(args, "llm_timeout", None):
            overrides["timeout"] = args.llm_timeout
        return overrides

    def __repr__(self) -> str:
        configured = "set" if self.is_configured() else "missing"
        return f"LLMConfig(base_url={self.base_url}, model={self.model}, api_key={configured})"
