"""Out-of-process tool runner bridge."""

from .bridge import InvocationRequest, RunnerStatus, ToolBridge
from .codec import JSONValue, decode_result, encode_request
from .exceptions import (
    DecodeError,
    ExecutionError,
    PathResolutionError,
    SerializationError,
    SpawnError,
    ToolBridgeError,
)
from .locator import RunnerLocator
from .process import CompletedInvocation, ProcessInvoker

__all__ = [
    "CompletedInvocation",
    "DecodeError",
    "ExecutionError",
    "InvocationRequest",
    "JSONValue",
    "PathResolutionError",
    "ProcessInvoker",
    "RunnerLocator",
    "RunnerStatus",
    "SerializationError",
    "SpawnError",
    "ToolBridge",
    "ToolBridgeError",
    "decode_result",
    "encode_request",
]
