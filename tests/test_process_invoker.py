from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from toolbridge.runner import ProcessInvoker, SpawnError


def test_invoker_passes_three_positional_arguments(runner_script: Path):
    completed = ProcessInvoker().invoke(sys.executable, runner_script, "argv", '{"x":1}')

    assert completed.succeeded
    assert json.loads(completed.stdout) == ["argv", '{"x":1}']


def test_invoker_returns_non_zero_exit_without_raising(runner_script: Path):
    completed = ProcessInvoker().invoke(sys.executable, runner_script, "unknown", "{}")

    assert completed.returncode == 1
    assert not completed.succeeded
    assert completed.stderr_text() == "bad tool"


def test_invoker_wraps_missing_binary(tmp_path: Path, runner_script: Path):
    missing = str(tmp_path / "no-such-node")

    with pytest.raises(SpawnError) as excinfo:
        ProcessInvoker().invoke(missing, runner_script, "echo", "{}")

    assert str(excinfo.value).startswith("Failed to invoke tool runner:")
    assert "no-such-node" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_invoker_wraps_permission_denied(tmp_path: Path, runner_script: Path):
    not_executable = tmp_path / "node"
    not_executable.write_text("", encoding="utf-8")
    not_executable.chmod(0o644)

    with pytest.raises(SpawnError):
        ProcessInvoker().invoke(str(not_executable), runner_script, "echo", "{}")
