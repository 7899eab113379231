"""Turn a free-text backend response into structured `go doc` commands."""

from __future__ import annotations

import shlex

from loguru import logger

from godoc_mcp.core.models import DOC_VERB, GO_TOOL, SCOPE_FLAG, LookupCommand
from godoc_mcp.services.prompts.lookup import COMMAND_PREFIX


def _strip_scope(arguments: list[str]) -> tuple[str, ...]:
    """Remove any `-C dir` / `-C=dir` the backend emitted itself."""
    kept: list[str] = []
    skip_next = False
    for arg in arguments:
        if skip_next:
            skip_next = False
            continue
        if arg == SCOPE_FLAG:
            skip_next = True
            continue
        if arg.startswith(SCOPE_FLAG + "="):
            continue
        kept.append(arg)
    return tuple(kept)


def parse_command(line: str) -> LookupCommand | None:
    """Parse one line, returning None unless it is a well-formed command.

    A line must start with `go doc`, and that is necessary but not
    sufficient. The line must also tokenize cleanly, its first two tokens
    must be exactly `go` and `doc` (so `go docs x` is rejected), and no token
    may contain a NUL byte. Rejected prefixed lines are logged at debug level.
    """
    text = line.strip()
    if not text.startswith(COMMAND_PREFIX):
        return None
    try:
        tokens = shlex.split(text, comments=True)
    except ValueError as e:
        logger.debug(f"Dropping unparsable command line {text!r}: {e}")
        return None
    if tokens[:2] != [GO_TOOL, DOC_VERB]:
        logger.debug(f"Dropping line that is not a go doc command: {text!r}")
        return None
    if any("\x00" in token for token in tokens):
        logger.debug(f"Dropping command line with a NUL byte: {text!r}")
        return None
    return LookupCommand(arguments=_strip_scope(tokens[2:]))


def extract_commands(response_text: str) -> list[LookupCommand]:
    """Return the commands in `response_text`, in the order they appear.

    Lines that do not start with `go doc` are discarded, as are prefixed
    lines `parse_command` rejects. An empty list is a normal outcome, never
    an error.
    """
    commands: list[LookupCommand] = []
    for line in response_text.splitlines():
        command = parse_command(line)
        if command is not None:
            commands.append(command)

    logger.debug(f"Extracted {len(commands)} go doc command(s)")
    return commands
