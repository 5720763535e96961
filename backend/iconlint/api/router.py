"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from iconlint.api import health, lint, path

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(lint.router)
api_router.include_router(path.router)
