"""Pipeline stages for the godoc lookup."""

from .aggregator import aggregate
from .command_extractor import extract_commands
from .command_runner import CommandRunner
from .orchestrator import DocLookupOrchestrator
from .prompts.lookup import build_lookup_prompt
from .root_locator import locate_project_root

__all__ = [
    "CommandRunner",
    "DocLookupOrchestrator",
    "aggregate",
    "build_lookup_prompt",
    "extract_commands",
    "locate_project_root",
]
