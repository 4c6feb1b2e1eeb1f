from fastapi import APIRouter

from routers import log, monitor

router = APIRouter()

# include sub-routers
router.include_router(monitor.router)
router.include_router(log.router)
