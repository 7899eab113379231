"""Request orchestration for the `godoc` tool.

Pipeline:
    backend client -> (locate root || read file) -> build prompt -> complete
    -> extract commands -> run commands -> aggregate

`DocLookupOrchestrator.analyze` never raises: every failure is converted to
an error-flagged ToolResponse naming the stage that failed.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from loguru import logger

from godoc_mcp.core.config.config import Config
from godoc_mcp.core.exceptions import (
    BackendError,
    GodocMCPError,
    InputError,
    Stage,
)
from godoc_mcp.core.models import (
    NOTHING_FOUND,
    AnalysisRequest,
    AnalysisResult,
    ToolResponse,
)
from godoc_mcp.interfaces.llm_provider import LLMProvider
from godoc_mcp.llm_manager import ProviderFactory, get_llm_provider
from godoc_mcp.services.aggregator import aggregate
from godoc_mcp.services.command_extractor import extract_commands
from godoc_mcp.services.command_runner import CommandRunner
from godoc_mcp.services.prompts.lookup import build_lookup_prompt
from godoc_mcp.services.root_locator import locate_project_root


class DocLookupOrchestrator:
    """Wires root discovery, the backend and `go doc` into one request cycle."""

    def __init__(
        self,
        config: Config,
        provider_factory: ProviderFactory | None = None,
        runner: CommandRunner | None = None,
    ):
        self._config = config
        self._provider_factory = provider_factory
        self._runner = runner or CommandRunner(config.godoc)

    async def analyze(self, request: AnalysisRequest) -> ToolResponse:
        """Run one request to completion or to its first fatal failure."""
        stage = Stage.CONFIGURATION
        try:
            provider = get_llm_provider(self._config.llm, self._provider_factory)

            stage = Stage.READ_FILE
            root, contents = await asyncio.gather(
                self._resolve_root(request), self._read_file(request.file_path)
            )

            stage = Stage.BUILD_PROMPT
            prompt = build_lookup_prompt(contents)

            stage = Stage.BACKEND
            response_text = await self._complete(provider, prompt, request.model)

            stage = Stage.EXTRACT
            commands = extract_commands(response_text)
            if not commands:
                logger.info(f"No go doc commands generated for {request.file_path}")
                return ToolResponse.from_result(NOTHING_FOUND)

            stage = Stage.RUN_COMMANDS
            outcomes = await self._runner.run(commands, root)

            stage = Stage.AGGREGATE
            result = aggregate(outcomes, self._config.godoc.failure_policy)
            self._log_result(request, result)
            return ToolResponse.from_result(result)

        except GodocMCPError as e:
            logger.error(f"godoc request failed: {e}")
            return ToolResponse.from_error(e)
        except Exception as e:
            logger.exception(f"Unexpected error during {stage.value}")
            return ToolResponse.from_error(GodocMCPError(str(e) or type(e).__name__, stage))

    async def _resolve_root(self, request: AnalysisRequest) -> Path | None:
        if request.root_path is not None:
            return request.root_path.resolve()
        try:
            root = await asyncio.to_thread(
                locate_project_root, request.file_path, self._config.godoc.marker_file
            )
        except (OSError, RuntimeError) as e:
            raise GodocMCPError(
                f"Cannot locate module root for {request.file_path}: {e}",
                Stage.LOCATE_ROOT,
            ) from e
        logger.debug(f"Module root for {request.file_path}: {root}")
        return root

    async def _read_file(self, file_path: Path) -> str:
        try:
            return await asyncio.to_thread(file_path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Cannot read {file_path}: {e}") from e

    async def _complete(self, provider: LLMProvider, prompt: str, model: str) -> str:
        try:
            response = await provider.complete(prompt, model=model)
        except GodocMCPError:
            raise
        except Exception as e:
            raise BackendError(f"Completion request failed: {e}") from e
        if not response.content or not response.content.strip():
            raise BackendError("No response received from the completion backend")
        return response.content

    def _log_result(self, request: AnalysisRequest, result: AnalysisResult) -> None:
        if result.is_nothing_found or not result.found:
            logger.info(f"No documentation found for {request.file_path}")
        else:
            logger.info(
                f"Documentation for {request.file_path}: "
                f"{result.succeeded} ok, {result.failed} failed"
            )
