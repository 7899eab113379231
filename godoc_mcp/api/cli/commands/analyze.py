"""Analyze command: run one godoc request from the terminal."""

from __future__ import annotations

import argparse
import sys

from loguru import logger
from rich.console import Console

from godoc_mcp.core.config.config import Config
from godoc_mcp.core.models import AnalysisRequest, ToolResponse
from godoc_mcp.llm_manager import ProviderFactory
from godoc_mcp.services.orchestrator import DocLookupOrchestrator


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


async def analyze_command(
    args: argparse.Namespace,
    config: Config,
    provider_factory: ProviderFactory | None = None,
    console: Console | None = None,
) -> int:
    """Run the pipeline for `args.file` and print the report.

    Returns:
        Process exit code: 1 for an error response, 0 otherwise
    """
    _configure_logging(bool(getattr(args, "verbose", False)) or config.debug)
    out = console or Console()
    err = Console(stderr=True)

    request = AnalysisRequest.from_arguments(
        args.file, getattr(args, "root", None), args.model or config.llm.model
    )
    orchestrator = DocLookupOrchestrator(config, provider_factory=provider_factory)

    with err.status(f"Looking up documentation for {request.file_path}..."):
        response: ToolResponse = await orchestrator.analyze(request)

    if response.is_error:
        err.print(f"[bold red]{response.text}[/bold red]", highlight=False)
        return 1

    out.print(response.text, markup=False, highlight=False)
    result = response.result
    if result is not None and not result.is_nothing_found:
        err.print(
            f"[dim]{result.succeeded} lookup(s) succeeded, {result.failed} failed[/dim]"
        )
    return 0
