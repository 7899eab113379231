import asyncio
from pathlib import Path

import pytest

from godoc_mcp.core.config.godoc_config import GodocConfig
from godoc_mcp.core.models import LookupCommand, OutcomeStatus
from godoc_mcp.services.command_runner import CommandRunner
from tests.helpers import DummyProc


def _cmd(symbol: str) -> LookupCommand:
    return LookupCommand(arguments=(symbol,))


@pytest.mark.asyncio
async def test_scopes_every_command_to_root(fake_go, tmp_path: Path):
    fake_go.ok("go.uber.org/zap.Logger", "type Logger struct")
    fake_go.ok("github.com/spf13/cobra.Command", "type Command struct")

    outcomes = await CommandRunner().run(
        [_cmd("go.uber.org/zap.Logger"), _cmd("github.com/spf13/cobra.Command")],
        tmp_path,
    )

    assert fake_go.calls == [
        ["go", "doc", "-C", str(tmp_path), "go.uber.org/zap.Logger"],
        ["go", "doc", "-C", str(tmp_path), "github.com/spf13/cobra.Command"],
    ]
    assert all(o.command.scope == tmp_path for o in outcomes)
    assert [o.text for o in outcomes] == ["type Logger struct", "type Command struct"]


@pytest.mark.asyncio
async def test_unscoped_when_no_root(fake_go):
    fake_go.ok("pkg.Sym", "doc")

    outcomes = await CommandRunner().run([_cmd("pkg.Sym")], None)

    assert fake_go.calls == [["go", "doc", "pkg.Sym"]]
    assert "-C" not in fake_go.calls[0]
    assert outcomes[0].command.scope is None


@pytest.mark.asyncio
async def test_failures_are_isolated(fake_go, tmp_path: Path):
    symbols = [f"example.com/m.S{i}" for i in range(6)]
    for i, symbol in enumerate(symbols):
        if i % 2:
            fake_go.fail(symbol, f"doc: no symbol S{i} in package example.com/m")
        else:
            fake_go.ok(symbol, f"doc for S{i}")

    outcomes = await CommandRunner().run([_cmd(s) for s in symbols], tmp_path)

    assert len(outcomes) == len(symbols)
    assert [o.command.symbol for o in outcomes] == symbols
    assert [o.status for o in outcomes] == [
        OutcomeStatus.SUCCESS,
        OutcomeStatus.FAILURE,
    ] * 3
    assert outcomes[1].error == "exit 1: doc: no symbol S1 in package example.com/m"


@pytest.mark.asyncio
async def test_commands_run_concurrently(monkeypatch):
    n = 4
    gate = asyncio.Event()
    started: list[tuple[str, ...]] = []

    async def _fake_exec(*argv, **kwargs):
        started.append(argv)
        if len(started) == n:
            gate.set()
        rc = 1 if argv[-1] == "bad" else 0
        return DummyProc(rc, b"ok", b"boom", gate=gate)

    monkeypatch.setattr(
        "godoc_mcp.services.command_runner.asyncio.create_subprocess_exec", _fake_exec
    )

    # Every process blocks until all of them have been started, so a
    # sequential runner would never finish.
    outcomes = await asyncio.wait_for(
        CommandRunner().run([_cmd("a"), _cmd("bad"), _cmd("c"), _cmd("d")], None),
        timeout=2,
    )

    assert len(started) == n
    assert [o.ok for o in outcomes] == [True, False, True, True]


@pytest.mark.asyncio
async def test_timeout_is_a_command_failure(fake_go):
    fake_go.ok("slow.Sym", "never", delay=5)
    fake_go.ok("fast.Sym", "quick")
    runner = CommandRunner(GodocConfig(command_timeout=0.05))

    outcomes = await runner.run([_cmd("slow.Sym"), _cmd("fast.Sym")], None)

    assert outcomes[0].status is OutcomeStatus.FAILURE
    assert "timed out" in (outcomes[0].error or "")
    assert outcomes[1].ok and outcomes[1].text == "quick"


@pytest.mark.asyncio
async def test_missing_binary_is_a_command_failure(monkeypatch):
    async def _raise(*argv, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", argv[0])

    monkeypatch.setattr(
        "godoc_mcp.services.command_runner.asyncio.create_subprocess_exec", _raise
    )

    outcomes = await CommandRunner().run([_cmd("x.Y")], None)

    assert outcomes[0].status is OutcomeStatus.FAILURE
    assert "could not start command" in (outcomes[0].error or "")


@pytest.mark.asyncio
async def test_custom_go_binary(fake_go):
    fake_go.ok("x.Y", "doc")
    runner = CommandRunner(GodocConfig(go_binary="/usr/local/go/bin/go"))

    outcomes = await runner.run([_cmd("x.Y")], None)

    assert fake_go.calls == [["/usr/local/go/bin/go", "doc", "x.Y"]]
    # Reports keep the canonical tool name
    assert outcomes[0].command.display() == "go doc x.Y"


@pytest.mark.asyncio
async def test_empty_batch_spawns_nothing(fake_go):
    assert await CommandRunner().run([], Path("/tmp")) == []
    assert fake_go.calls == []


@pytest.mark.asyncio
async def test_rejected_argv_does_not_sink_the_batch(monkeypatch):
    async def _exec(*argv, **kwargs):
        if "\x00" in argv[-1]:
            raise ValueError("embedded null byte")
        return DummyProc(0, b"type Sym struct", b"")

    monkeypatch.setattr(
        "godoc_mcp.services.command_runner.asyncio.create_subprocess_exec", _exec
    )

    outcomes = await asyncio.wait_for(
        CommandRunner().run([_cmd("good.Sym"), _cmd("bad\x00Sym")], None),
        timeout=2,
    )

    assert len(outcomes) == 2
    assert outcomes[0].ok and outcomes[0].text == "type Sym struct"
    assert outcomes[1].status is OutcomeStatus.FAILURE
    assert "embedded null byte" in (outcomes[1].error or "")


@pytest.mark.asyncio
async def test_unexpected_error_is_a_command_failure(monkeypatch):
    async def _exec(*argv, **kwargs):
        if argv[-1] == "boom.Sym":
            raise RuntimeError("pipe setup failed")
        return DummyProc(0, b"doc", b"")

    monkeypatch.setattr(
        "godoc_mcp.services.command_runner.asyncio.create_subprocess_exec", _exec
    )

    outcomes = await CommandRunner().run([_cmd("boom.Sym"), _cmd("fine.Sym")], None)

    assert outcomes[0].error == "RuntimeError: pipe setup failed"
    assert outcomes[1].ok
