"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.cart import router as cart_router
from api.v1.routes.profiles import profile_router, profiles_router

router = APIRouter()
router.include_router(profiles_router)
router.include_router(profile_router)
router.include_router(cart_router)
