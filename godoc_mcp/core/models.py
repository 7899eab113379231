"""Data model for a single documentation lookup request."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

DEFAULT_MODEL = "inception/mercury-coder"

GO_TOOL = "go"
DOC_VERB = "doc"
SCOPE_FLAG = "-C"


@dataclass(frozen=True)
class AnalysisRequest:
    """One invocation of the `godoc` tool."""

    file_path: Path
    root_path: Path | None = None
    model: str = DEFAULT_MODEL

    @classmethod
    def from_arguments(
        cls,
        file_path: str | Path,
        root_path: str | Path | None = None,
        model: str | None = None,
    ) -> AnalysisRequest:
        """Build a request from raw tool/CLI arguments.

        Empty strings are treated as "not given" for the optional fields.
        """
        return cls(
            file_path=Path(file_path),
            root_path=Path(root_path) if root_path else None,
            model=model or DEFAULT_MODEL,
        )


@dataclass(frozen=True)
class LookupCommand:
    """A `go doc` invocation assembled from typed fields.

    `arguments` holds everything after the verb (flags and the symbol path);
    `scope` is the directory passed with `-C`, or None for an unscoped run.
    """

    arguments: tuple[str, ...]
    scope: Path | None = None
    tool: str = GO_TOOL
    verb: str = DOC_VERB

    @property
    def symbol(self) -> str:
        """Last non-flag argument, i.e. the symbol path (may be empty)."""
        for arg in reversed(self.arguments):
            if not arg.startswith("-"):
                return arg
        return ""

    def scoped(self, root: Path | None) -> LookupCommand:
        if root is None:
            return self
        return replace(self, scope=root)

    def argv(self, tool: str | None = None) -> list[str]:
        """Argument vector for the subprocess layer.

        Args:
            tool: Optional executable override (e.g. an absolute path to go)
        """
        argv = [tool or self.tool, self.verb]
        if self.scope is not None:
            argv.extend([SCOPE_FLAG, str(self.scope)])
        argv.extend(self.arguments)
        return argv

    def display(self) -> str:
        return shlex.join(self.argv())

    def __str__(self) -> str:
        return self.display()


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class LookupOutcome:
    """Result of running one (already scoped) command."""

    command: LookupCommand
    status: OutcomeStatus
    text: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @classmethod
    def success(cls, command: LookupCommand, text: str) -> LookupOutcome:
        return cls(command=command, status=OutcomeStatus.SUCCESS, text=text)

    @classmethod
    def failure(cls, command: LookupCommand, error: str) -> LookupOutcome:
        return cls(command=command, status=OutcomeStatus.FAILURE, error=error)


NOTHING_FOUND_TEXT = "No go doc documentation was found for this file."


@dataclass(frozen=True)
class AnalysisResult:
    """Final joined report.

    `found` is False for the "nothing found" sentinel and for reports that
    only contain annotated failures.
    """

    text: str
    found: bool = True
    succeeded: int = 0
    failed: int = 0

    @property
    def is_nothing_found(self) -> bool:
        return self == NOTHING_FOUND


NOTHING_FOUND = AnalysisResult(text=NOTHING_FOUND_TEXT, found=False)


@dataclass(frozen=True)
class ToolResponse:
    """Transport-neutral response: a text payload plus an error flag."""

    text: str
    is_error: bool = False
    result: AnalysisResult | None = field(default=None, compare=False)

    @classmethod
    def from_result(cls, result: AnalysisResult) -> ToolResponse:
        return cls(text=result.text, is_error=False, result=result)

    @classmethod
    def from_error(cls, error: Exception) -> ToolResponse:
        return cls(text=f"Error: {error}", is_error=True)
