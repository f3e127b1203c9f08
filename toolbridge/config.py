"""Application configuration module."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).resolve().parent

DEFAULT_RUNNER_BINARY = "node"
RUNNER_ENTRYPOINT = "packages/tool-runner/dist/cli.cjs"

# Candidate runner scripts, checked in this order. The first is relative to
# the working directory; the second lives in the bundled resources shipped
# inside the installed package.
DEV_RUNNER_PATH = Path("..") / RUNNER_ENTRYPOINT
BUNDLED_RESOURCES_DIR = PACKAGE_ROOT / "resources"


class Settings(BaseSettings):
    """Centralised application settings sourced from environment variables."""

    model_config = SettingsConfigDict(env_prefix="PRO_ASSIST_", extra="ignore")

    environment: str = "development"
    log_level: str = "INFO"

    # ``PRO_ASSIST_NODE`` overrides the binary used to run the entry script.
    node: str = DEFAULT_RUNNER_BINARY


def get_settings() -> Settings:
    """Return settings read from the current environment."""

    return Settings()


settings = Settings()
