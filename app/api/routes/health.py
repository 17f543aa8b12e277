from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_engine_config
from app.core.engine_config import EngineConfig

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", summary="Service healthcheck")
def healthcheck(config: EngineConfig = Depends(get_engine_config)) -> dict[str, str]:
    return {"status": "ok", "engineConfig": config.version}
