# delivery_tracker/api/router.py
from fastapi import APIRouter
from delivery_tracker.api.auth import router as auth_router
from delivery_tracker.modules.packages.router import router as packages_router

api_router = APIRouter()

api_router.include_router(auth_router, tags=["authentication"])

api_router.include_router(
    packages_router,
    prefix="/packages",
    tags=["Packages"]
)
