"""API v1 router aggregation."""

from fastapi import APIRouter

from llm_registry.api.routes.v1 import health, models

v1_router = APIRouter()

# Health check routes (no auth required)
v1_router.include_router(health.router, tags=["health"])

# Model registry routes
v1_router.include_router(models.router, tags=["models"])
