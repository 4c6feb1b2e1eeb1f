from fastapi import FastAPI
from pydantic_settings import BaseSettings
from contextlib import asynccontextmanager
from typing import Optional
import logging

from routers.api import router as api_router
from schemas import AppHealthOK
from core.service_manager import service_manager
from core.config_loader import config_loader

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    app_name: str = "Sewage Monitor API"
    debug: bool = True
    # Overridable by TICK_PERIOD_MS, otherwise taken from the config file
    tick_period_ms: int = config_loader.get_tick_period_ms()
    # When False the simulation only advances through POST /api/monitor/tick
    scheduler_enabled: bool = True
    random_seed: Optional[int] = None


settings = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup/shutdown without deprecated on_event."""
    logger.info(
        "Starting background services (tick period %d ms, scheduler %s)",
        settings.tick_period_ms, "enabled" if settings.scheduler_enabled else "disabled",
    )
    await service_manager.start_services(
        tick_period_ms=settings.tick_period_ms,
        scheduler_enabled=settings.scheduler_enabled,
        seed=settings.random_seed,
    )

    try:
        yield
    finally:
        logger.info("Stopping background services")
        service_manager.stop_services()


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)


@app.get("/", tags=["meta"])
async def read_root() -> dict[str, str]:
    return {"message": settings.app_name}


@app.get("/health", tags=["meta"], response_model=AppHealthOK)
async def healthcheck() -> AppHealthOK:
    return AppHealthOK(status="ok", app=settings.app_name)


# mount API router under /api
app.include_router(api_router, prefix="/api")
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
