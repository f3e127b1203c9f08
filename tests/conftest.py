from __future__ import annotations

import sys
from pathlib import Path

import pytest

from toolbridge.config import Settings
from toolbridge.runner import RunnerLocator

RUNNER_SCRIPT = """
import json, sys
tool = sys.argv[1]
payload = json.loads(sys.argv[2])
if tool == "echo":
    json.dump(payload, sys.stdout)
elif tool == "argv":
    json.dump(sys.argv[1:], sys.stdout)
elif tool == "garbage":
    sys.stdout.write("not json")
elif tool == "latin1":
    sys.stdout.flush()
    sys.stdout.buffer.write(b'"caf\\xff"')
else:
    sys.stderr.write("bad tool")
    sys.exit(1)
""".strip()


@pytest.fixture()
def runner_script(tmp_path: Path) -> Path:
    script = tmp_path / "cli.py"
    script.write_text(RUNNER_SCRIPT, encoding="utf-8")
    return script


@pytest.fixture()
def runner_settings():
    def factory() -> Settings:
        return Settings(node=sys.executable)

    return factory


@pytest.fixture()
def runner_locator(runner_script: Path):
    def factory() -> RunnerLocator:
        return RunnerLocator(dev_path=runner_script, resources_dir=None)

    return factory
