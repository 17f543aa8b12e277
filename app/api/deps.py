from __future__ import annotations

from datetime import date
from functools import lru_cache

from fastapi import Header, HTTPException, status

from app.core.config import get_settings
from app.core.engine_config import EngineConfig
from app.services import EngineConfigLoader, OptimizationEngine


@lru_cache
def get_engine_config() -> EngineConfig:
    return EngineConfigLoader.from_settings(get_settings()).config


@lru_cache
def get_engine() -> OptimizationEngine:
    return OptimizationEngine(get_engine_config())


def get_clock() -> date:
    return date.today()


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    settings = get_settings()
    expected = settings.api_key
    if expected is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API key not configured",
        )
    if x_api_key is None or x_api_key != expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )
