# nextup/api/api.py
from fastapi import APIRouter

api_router = APIRouter()

# Unauthenticated endpoints
from nextup.api.endpoints.health import router as health_router
api_router.include_router(health_router, tags=["health"])

from nextup.api.endpoints.auth import router as auth_router
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])

# Bearer-token protected endpoints
from nextup.api.endpoints.users import router as users_router
api_router.include_router(users_router, tags=["users"])

from nextup.api.endpoints.teams import router as teams_router
api_router.include_router(teams_router, prefix="/teams", tags=["teams"])

from nextup.api.endpoints.presentations import router as presentations_router
api_router.include_router(presentations_router, prefix="/teams", tags=["presentations"])

from nextup.api.endpoints.randomizer import router as randomizer_router
api_router.include_router(randomizer_router, tags=["randomizer"])

from nextup.api.endpoints.export import router as export_router
api_router.include_router(export_router, tags=["export"])
