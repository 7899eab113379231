"""Declarative tool registry for the MCP server.

Tools are defined once here; the server wrapper only translates between the
MCP types and these implementations.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from godoc_mcp.core.config.config import Config
from godoc_mcp.core.models import AnalysisRequest, ToolResponse
from godoc_mcp.llm_manager import ProviderFactory
from godoc_mcp.services.orchestrator import DocLookupOrchestrator


async def godoc_impl(
    config: Config,
    file_path: str,
    root_path: str | None = None,
    model: str | None = None,
    provider_factory: ProviderFactory | None = None,
) -> ToolResponse:
    """Analyze a Go file and return `go doc` output for its dependencies."""
    request = AnalysisRequest.from_arguments(
        file_path, root_path, model or config.llm.model
    )
    orchestrator = DocLookupOrchestrator(config, provider_factory=provider_factory)
    return await orchestrator.analyze(request)


@dataclass
class Tool:
    """Tool definition with metadata and implementation."""

    name: str
    title: str
    description: str
    parameters: dict[str, Any]
    implementation: Callable


TOOL_DEFINITIONS = [
    Tool(
        name="godoc",
        title="GoDoc Search",
        description="Uses GoDoc to search for information about Go packages enhanced with AI",
        parameters={
            "properties": {
                "filePath": {
                    "description": "Path to the Go file to analyze",
                    "type": "string",
                },
                "rootPath": {
                    "description": "Root path of the Go project (where go.mod is located). Discovered from filePath when omitted.",
                    "type": "string",
                },
                "model": {
                    "description": "Model to use for generating go doc commands. Defaults to the server's configured model.",
                    "type": "string",
                },
            },
            "required": ["filePath"],
            "type": "object",
        },
        implementation=godoc_impl,
    ),
]

TOOL_REGISTRY: dict[str, Tool] = {tool.name: tool for tool in TOOL_DEFINITIONS}


async def execute_tool(
    tool_name: str,
    config: Config,
    arguments: dict[str, Any],
    provider_factory: ProviderFactory | None = None,
) -> ToolResponse:
    """Execute a tool from the registry with proper argument handling.

    Raises:
        ValueError: If the tool is unknown or a required argument is missing
    """
    if tool_name not in TOOL_REGISTRY:
        raise ValueError(f"Unknown tool: {tool_name}")

    tool = TOOL_REGISTRY[tool_name]

    if tool_name == "godoc":
        file_path = arguments.get("filePath")
        if not file_path or not isinstance(file_path, str):
            raise ValueError("filePath is required")
        return await tool.implementation(
            config=config,
            file_path=file_path,
            root_path=arguments.get("rootPath"),
            model=arguments.get("model"),
            provider_factory=provider_factory,
        )

    raise ValueError(f"Tool {tool_name} not implemented in execute_tool")
