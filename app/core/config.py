from __future__ import annotations

import os
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    log_level: str = "INFO"
    poverty_guideline: Decimal | None = None
    engine_config_path: str | None = None


@lru_cache
def get_settings() -> Settings:
    return Settings(
        api_key=os.getenv("API_KEY"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        poverty_guideline=os.getenv("POVERTY_GUIDELINE") or None,
        engine_config_path=os.getenv("ENGINE_CONFIG_PATH") or None,
    )
