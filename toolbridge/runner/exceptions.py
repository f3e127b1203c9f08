"""Failures raised while invoking the external tool runner."""


class ToolBridgeError(RuntimeError):
    """Base exception raised when a tool invocation fails.

    ``stage`` names the pipeline step that failed and ``str(error)`` is the
    message surfaced to callers.
    """

    stage = "invoke"


class PathResolutionError(ToolBridgeError):
    """Raised when none of the candidate runner scripts exist on disk."""

    stage = "locate"


class SerializationError(ToolBridgeError):
    """Raised when the payload cannot be represented as JSON text."""

    stage = "encode"


class SpawnError(ToolBridgeError):
    """Raised when the runner binary cannot be started."""

    stage = "spawn"


class ExecutionError(ToolBridgeError):
    """Raised when the runner exits with a non-zero status."""

    stage = "execute"

    def __init__(self, stderr: str, returncode: int) -> None:
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"Tool runner error: {stderr}")


class DecodeError(ToolBridgeError):
    """Raised when the runner's stdout is not a single JSON value."""

    stage = "decode"


__all__ = [
    "DecodeError",
    "ExecutionError",
    "PathResolutionError",
    "SerializationError",
    "SpawnError",
    "ToolBridgeError",
]
