from fastapi import APIRouter

from gunamilan.api.v1.routes.health import router as health_router
from gunamilan.api.v1.routes.horoscope import router as horoscope_router

api_router = APIRouter()

# ─────────────────────────────────────────────
# Public Routes
# ─────────────────────────────────────────────

api_router.include_router(
    health_router,
    tags=["Health"],
)

api_router.include_router(
    horoscope_router,
    prefix="/horoscope",
    tags=["Horoscope"],
)
