"""Bridge that routes tool invocations to the out-of-process tool runner."""
from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from uuid import uuid4

from toolbridge.config import Settings, get_settings
from toolbridge.logging import get_logger, invocation_context

from .codec import JSONValue, decode_result, encode_request
from .exceptions import ExecutionError, ToolBridgeError
from .locator import RunnerLocator
from .process import ProcessInvoker


@dataclass(slots=True, frozen=True)
class InvocationRequest:
    """A tool identifier and its opaque JSON payload."""

    tool: str
    payload: Any = None


@dataclass(slots=True, frozen=True)
class RunnerStatus:
    """Binary and script a call made now would use."""

    binary: str
    script_path: Path
    candidates: tuple[Path, ...]


class ToolBridge:
    """Run the locate, encode, spawn and decode stages for each invocation.

    Settings are read once at the start of every call so the binary override
    always reflects the current environment. Nothing is cached between calls.
    """

    def __init__(
        self,
        *,
        settings_factory: Callable[[], Settings] = get_settings,
        invoker: ProcessInvoker | None = None,
        locator_factory: Callable[[], RunnerLocator] = RunnerLocator,
    ) -> None:
        self._settings_factory = settings_factory
        self._invoker = invoker or ProcessInvoker()
        self._locator_factory = locator_factory
        self._logger = get_logger(__name__)

    def invoke(self, tool: str, payload: Any = None) -> JSONValue:
        """Invoke *tool* with *payload* and return the runner's JSON result."""

        request = InvocationRequest(tool=tool, payload=payload)
        config = self._settings_factory()
        locator = self._locator_factory()
        with invocation_context(tool=request.tool, invocation_id=uuid4().hex):
            self._logger.info("tools.invoke.start")
            started = time.perf_counter()
            try:
                result = self._run(request, binary=config.node, locator=locator)
            except ToolBridgeError as exc:
                self._logger.warning("tools.invoke.failed", stage=exc.stage, error=str(exc))
                raise
            self._logger.info(
                "tools.invoke.completed",
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return result

    async def invoke_async(self, tool: str, payload: Any = None) -> JSONValue:
        """Await :meth:`invoke` on a worker thread to keep the event loop free."""

        return await asyncio.to_thread(self.invoke, tool, payload)

    def locate(self) -> RunnerStatus:
        """Resolve the runner for the current environment without spawning it."""

        config = self._settings_factory()
        locator = self._locator_factory()
        return RunnerStatus(
            binary=config.node,
            script_path=locator.resolve(),
            candidates=locator.candidates(),
        )

    def _run(self, request: InvocationRequest, *, binary: str, locator: RunnerLocator) -> JSONValue:
        script_path = locator.resolve()
        self._logger.info(
            "tools.invoke.runner_resolved",
            script_path=str(script_path),
            binary=binary,
        )
        payload_json = encode_request(request.payload)
        completed = self._invoker.invoke(binary, script_path, request.tool, payload_json)
        if not completed.succeeded:
            raise ExecutionError(completed.stderr_text(), completed.returncode)
        return decode_result(completed.stdout)


__all__ = ["InvocationRequest", "RunnerStatus", "ToolBridge"]
