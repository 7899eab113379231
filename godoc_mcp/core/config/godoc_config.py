"""Configuration for the local `go doc` toolchain."""

import argparse
import os
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

FailurePolicy = Literal["annotate", "drop"]


class GodocConfig(BaseModel):
    """Settings for root discovery and command execution."""

    go_binary: str = Field(default="go", description="Go executable to invoke")
    marker_file: str = Field(
        default="go.mod", description="File that marks a Go module root"
    )
    command_timeout: float = Field(
        default=30.0,
        ge=0,
        description="Per-command timeout in seconds (0 = wait indefinitely)",
    )
    failure_policy: FailurePolicy = Field(
        default="annotate",
        description="annotate: keep failed commands with their error; drop: omit them",
    )

    @field_validator("go_binary", "marker_file")
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value must not be blank")
        return v.strip()

    @field_validator("failure_policy", mode="before")
    def normalize_policy(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def timeout_or_none(self) -> float | None:
        return self.command_timeout or None

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add go toolchain CLI arguments."""
        parser.add_argument(
            "--go-binary",
            help="Go executable used for `go doc` (default: go)",
        )
        parser.add_argument(
            "--command-timeout",
            type=float,
            help="Per-command timeout in seconds, 0 disables (default: 30)",
        )
        parser.add_argument(
            "--failure-policy",
            choices=["annotate", "drop"],
            help="How failed go doc commands appear in the report (default: annotate)",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load go toolchain config from environment variables."""
        config: dict[str, Any] = {}
        if go_binary := os.getenv("GODOC_MCP__GODOC__GO_BINARY"):
            config["go_binary"] = go_binary
        if marker := os.getenv("GODOC_MCP__GODOC__MARKER_FILE"):
            config["marker_file"] = marker
        if timeout := os.getenv("GODOC_MCP__GODOC__COMMAND_TIMEOUT"):
            config["command_timeout"] = float(timeout)
        if policy := os.getenv("GODOC_MCP__GODOC__FAILURE_POLICY"):
            config["failure_policy"] = policy
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract go toolchain config from CLI arguments."""
        overrides: dict[str, Any] = {}
        if getattr(args, "go_binary", None):
            overrides["go_binary"] = args.go_binary
        if getattr(args, "command_timeout", None) is not None:
            overrides["command_timeout"] = args.command_timeout
        if getattr(args, "failure_policy", None):
            overrides["failure_policy"] = args.failure_policy
        return overrides
