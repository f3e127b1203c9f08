"""JSON encoding of tool payloads and decoding of runner output."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from .exceptions import DecodeError, SerializationError

JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]


def encode_request(payload: Any) -> str:
    """Serialise *payload* to compact JSON text suitable for a process argument."""

    try:
        return json.dumps(payload, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Failed to encode tool payload: {exc}") from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name!r}")


def decode_result(stdout: bytes) -> JSONValue:
    """Parse runner stdout as a single JSON value.

    Invalid UTF-8 sequences are replaced rather than rejected; only the JSON
    parse itself can fail.
    """

    text = stdout.decode("utf-8", errors="replace")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Tool runner returned invalid JSON: {exc}") from exc


__all__ = ["JSONValue", "decode_result", "encode_request"]
