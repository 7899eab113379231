"""Concurrent execution of `go doc` commands.

Every command is started without waiting on the others and the runner
returns once all of them have settled. A failing command (nonzero exit,
missing binary, bad argv, timeout) only produces a failed outcome for itself.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from godoc_mcp.core.config.godoc_config import GodocConfig
from godoc_mcp.core.models import LookupCommand, LookupOutcome


class CommandRunner:
    """Runs lookup commands against the local Go toolchain."""

    def __init__(self, config: GodocConfig | None = None):
        self._config = config or GodocConfig()

    async def run(
        self, commands: Sequence[LookupCommand], root: Path | None
    ) -> list[LookupOutcome]:
        """Run all commands concurrently, scoped to `root` when one is known.

        Returns:
            One outcome per command, in the order of `commands`
        """
        if not commands:
            return []

        scoped = [command.scoped(root) for command in commands]
        if root is None:
            logger.debug("No module root found; running go doc unscoped")

        outcomes = await asyncio.gather(*(self._run_one(cmd) for cmd in scoped))

        failed = sum(1 for outcome in outcomes if not outcome.ok)
        logger.debug(
            f"go doc batch finished: {len(outcomes) - failed} ok, {failed} failed"
        )
        return list(outcomes)

    async def _run_one(self, command: LookupCommand) -> LookupOutcome:
        argv = command.argv(self._config.go_binary)
        timeout = self._config.timeout_or_none
        process = None
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=timeout
            )
        except asyncio.TimeoutError:
            if process and process.returncode is None:
                process.kill()
                await process.wait()
            logger.warning(f"{command} timed out after {timeout}s")
            return LookupOutcome.failure(command, f"timed out after {timeout}s")
        except (OSError, ValueError) as e:
            # Missing go binary, permission problems, NUL bytes in argv, etc.
            if process and process.returncode is None:
                process.kill()
                await process.wait()
            logger.warning(f"{command} could not be started: {e}")
            return LookupOutcome.failure(command, f"could not start command: {e}")
        except Exception as e:
            if process and process.returncode is None:
                process.kill()
                await process.wait()
            logger.exception(f"Unexpected error running {command}")
            return LookupOutcome.failure(command, f"{type(e).__name__}: {e}")

        if process.returncode != 0:
            err = (stderr or b"").decode("utf-8", errors="replace").strip()
            message = f"exit {process.returncode}" + (f": {err}" if err else "")
            logger.warning(f"{command} failed ({message})")
            return LookupOutcome.failure(command, message)

        return LookupOutcome.success(
            command, (stdout or b"").decode("utf-8", errors="replace")
        )
