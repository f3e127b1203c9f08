"""Process invoker that runs the tool runner following its argv/stdout contract."""
from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from .exceptions import SpawnError


@dataclass(slots=True, frozen=True)
class CompletedInvocation:
    """Captured outcome of one runner process."""

    stdout: bytes
    stderr: bytes
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


class ProcessInvoker:
    """Spawn ``<binary> <script> <tool> <json>`` and wait for it to exit."""

    def invoke(
        self,
        binary: str,
        script_path: Path,
        tool: str,
        payload_json: str,
    ) -> CompletedInvocation:
        """Run the runner to completion, capturing both streams in full.

        A non-zero exit status is returned, not raised; only failures to start
        the process raise :class:`SpawnError`.
        """

        command = [binary, str(script_path), tool, payload_json]
        try:
            completed = subprocess.run(  # noqa: S603 - argv built from settings
                command,
                capture_output=True,
                check=False,
            )
        except (OSError, ValueError) as exc:
            raise SpawnError(f"Failed to invoke tool runner: {exc}") from exc
        return CompletedInvocation(
            stdout=completed.stdout,
            stderr=completed.stderr,
            returncode=completed.returncode,
        )


__all__ = ["CompletedInvocation", "ProcessInvoker"]
