"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import admin_progress, health, progress

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(progress.router, prefix="/progress", tags=["progress"])
api_router.include_router(admin_progress.router, prefix="/admin", tags=["admin-progress"])
