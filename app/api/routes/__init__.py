from __future__ import annotations

from fastapi import APIRouter

from . import health, optimization

router = APIRouter()
router.include_router(health.router)
router.include_router(optimization.router)

__all__ = ["router"]
