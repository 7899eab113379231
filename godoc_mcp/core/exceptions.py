"""Error taxonomy for the lookup pipeline.

Only the fatal categories are exceptions. Empty extraction, per-command
failures and total command failure are reported through normal results.
"""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """Pipeline stage a failure is attributed to."""

    CONFIGURATION = "configuration"
    READ_FILE = "read_file"
    LOCATE_ROOT = "locate_root"
    BUILD_PROMPT = "build_prompt"
    BACKEND = "backend"
    EXTRACT = "extract"
    RUN_COMMANDS = "run_commands"
    AGGREGATE = "aggregate"


class GodocMCPError(Exception):
    """Base class for errors that abort a request."""

    stage: Stage = Stage.CONFIGURATION

    def __init__(self, message: str, stage: Stage | None = None):
        super().__init__(message)
        self.message = message
        if stage is not None:
            self.stage = stage

    def __str__(self) -> str:
        return f"[{self.stage.value}] {self.message}"


class ConfigurationError(GodocMCPError):
    """Missing or invalid process configuration (e.g. no credential)."""

    stage = Stage.CONFIGURATION


class InputError(GodocMCPError):
    """The source file could not be read."""

    stage = Stage.READ_FILE


class BackendError(GodocMCPError):
    """The completion call failed or returned no usable text."""

    stage = Stage.BACKEND
