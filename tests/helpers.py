"""Test doubles: stub backend, fake `go doc` subprocesses, sample Go source."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from godoc_mcp.interfaces.llm_provider import LLMProvider, LLMResponse

SAMPLE_GO = """package main

import (
\t"github.com/spf13/cobra"
\t"go.uber.org/zap"
)

func main() {
\tlogger, _ := zap.NewProduction()
\tcmd := &cobra.Command{Use: "demo"}
\tlogger.Info("starting", zap.String("cmd", cmd.Use))
}
"""


class StubProvider(LLMProvider):
    """Backend stub returning canned text and recording every prompt."""

    def __init__(self, content: str = "", error: Exception | None = None):
        self.content = content
        self.error = error
        self.prompts: list[str] = []
        self.models: list[str | None] = []

    @property
    def name(self) -> str:
        return "stub"

    @property
    def model(self) -> str:
        return "stub-model"

    async def complete(
        self,
        prompt: str,
        model: str | None = None,
        timeout: float | None = None,
    ) -> LLMResponse:
        self.prompts.append(prompt)
        self.models.append(model)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, tokens_used=0, model=model or "stub-model")


class DummyProc:
    def __init__(
        self,
        rc: int = 0,
        out: bytes = b"",
        err: bytes = b"",
        delay: float = 0.0,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.returncode: int | None = None
        self._rc = rc
        self._out = out
        self._err = err
        self._delay = delay
        self._gate = gate
        self.killed = False

    async def communicate(self):
        if self._gate is not None:
            await self._gate.wait()
        if self._delay:
            await asyncio.sleep(self._delay)
        self.returncode = self._rc
        return self._out, self._err

    def kill(self) -> None:
        self.killed = True
        self.returncode = -9

    async def wait(self) -> int | None:
        return self.returncode


class FakeGoDoc:
    """Stands in for `asyncio.create_subprocess_exec` in the command runner.

    Responses are keyed by symbol (last argv element); unknown symbols fail
    like `go doc` does for a missing symbol.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, Any]] = []
        self.responses: dict[str, Callable[[], DummyProc]] = {}

    def ok(self, symbol: str, text: str, **kwargs: Any) -> None:
        self.responses[symbol] = lambda: DummyProc(0, text.encode(), b"", **kwargs)

    def fail(self, symbol: str, stderr: str = "", rc: int = 1, **kwargs: Any) -> None:
        self.responses[symbol] = lambda: DummyProc(rc, b"", stderr.encode(), **kwargs)

    async def __call__(self, *argv: str, **kwargs: Any) -> DummyProc:
        self.calls.append(list(argv))
        self.kwargs.append(kwargs)
        factory = self.responses.get(argv[-1])
        if factory is None:
            return DummyProc(1, b"", f"doc: no symbol {argv[-1]}".encode())
        return factory()
