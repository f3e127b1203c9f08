"""Resolve the tool runner entry script from its fixed candidate paths."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from toolbridge.config import BUNDLED_RESOURCES_DIR, DEV_RUNNER_PATH, RUNNER_ENTRYPOINT

from .exceptions import PathResolutionError

MISSING_RUNNER_MESSAGE = (
    "Tool runner binary missing. Build @pro-assist/tool-runner before starting the app."
)


@dataclass(slots=True, frozen=True)
class RunnerLocator:
    """Pick the first existing runner script, local build before bundled copy."""

    dev_path: Path = DEV_RUNNER_PATH
    resources_dir: Path | None = BUNDLED_RESOURCES_DIR
    entrypoint: str = RUNNER_ENTRYPOINT

    def candidates(self) -> tuple[Path, ...]:
        """Return the candidate paths in priority order."""

        candidates = [Path(self.dev_path)]
        if self.resources_dir is not None:
            candidates.append(Path(self.resources_dir) / self.entrypoint)
        return tuple(candidates)

    def resolve(self) -> Path:
        for candidate in self.candidates():
            if candidate.exists():
                return candidate
        raise PathResolutionError(MISSING_RUNNER_MESSAGE)


__all__ = ["MISSING_RUNNER_MESSAGE", "RunnerLocator"]
