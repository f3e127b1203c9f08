"""Application entry point for the Pro Assist tool bridge."""
from fastapi import APIRouter, FastAPI

from .api.tools import router as tools_router
from .config import settings
from .logging import configure_logging, get_logger

configure_logging(settings.log_level)
logger = get_logger(__name__)
logger.info("app.startup", environment=settings.environment)

app = FastAPI(title="pro-assist-toolbridge", version="0.1.0")

router = APIRouter(tags=["health"])


@router.get("/health", summary="Infra healthcheck")
def healthcheck() -> dict[str, str]:
    """Simple health endpoint for infrastructure smoke tests."""

    return {"status": "ok", "environment": settings.environment}


app.include_router(router)
app.include_router(tools_router)
