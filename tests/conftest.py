"""Shared fixtures: stub backend, fake `go doc` subprocesses, Go module trees."""

from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from godoc_mcp.core.config.config import Config
from godoc_mcp.core.config.godoc_config import GodocConfig
from godoc_mcp.core.config.llm_config import LLMConfig
from godoc_mcp.llm_manager import reset_llm_provider
from tests.helpers import SAMPLE_GO, FakeGoDoc


@pytest.fixture(autouse=True)
def _reset_backend():
    """Each test gets a fresh process-wide backend slot."""
    reset_llm_provider()
    yield
    reset_llm_provider()


@pytest.fixture(autouse=True)
def _drop_cli_log_sinks():
    """The CLI rebinds loguru to the current stderr; detach it afterwards."""
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "OPENROUTER_API_KEY",
        "GODOC_MCP__LLM__API_KEY",
        "GODOC_MCP__LLM__MODEL",
        "GODOC_MCP__LLM__BASE_URL",
        "GODOC_MCP__GODOC__FAILURE_POLICY",
        "GODOC_MCP__GODOC__COMMAND_TIMEOUT",
        "GODOC_MCP_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_go(monkeypatch) -> FakeGoDoc:
    fake = FakeGoDoc()
    monkeypatch.setattr(
        "godoc_mcp.services.command_runner.asyncio.create_subprocess_exec", fake
    )
    return fake


@pytest.fixture
def config() -> Config:
    """Config with a credential present."""
    return Config(llm=LLMConfig(api_key="test-key"), godoc=GodocConfig())


@pytest.fixture
def go_module(tmp_path: Path) -> tuple[Path, Path]:
    """A module root with go.mod and a nested source file."""
    root = tmp_path / "project"
    pkg = root / "cmd" / "demo"
    pkg.mkdir(parents=True)
    (root / "go.mod").write_text("module example.com/demo\n\ngo 1.22\n", encoding="utf-8")
    source = pkg / "main.go"
    source.write_text(SAMPLE_GO, encoding="utf-8")
    return root, source
