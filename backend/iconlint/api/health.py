"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from iconlint import __version__
from iconlint.engine.rules import RULES
from iconlint.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        rules_registered=len(RULES),
    )


@router.get("/rules")
async def rules() -> dict[str, str]:
    return {rule.name.value: rule.description for rule in RULES}
