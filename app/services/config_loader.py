from __future__ import annotations

import json
from dataclasses import replace
from decimal import Decimal
from functools import cached_property
from pathlib import Path

from app.core.config import Settings
from app.core.engine_config import EngineConfig
from app.core.errors import ConfigurationError
from app.core.logging import get_logger

logger = get_logger(__name__)


class EngineConfigLoader:
    def __init__(
        self,
        config_path: str | Path | None = None,
        poverty_guideline: Decimal | None = None,
    ) -> None:
        self.config_path = Path(config_path) if config_path else None
        if self.config_path is not None and not self.config_path.exists():
            raise ConfigurationError(f"engine config file not found: {self.config_path}")
        self.poverty_guideline = poverty_guideline

    @classmethod
    def from_settings(cls, settings: Settings) -> "EngineConfigLoader":
        return cls(settings.engine_config_path, settings.poverty_guideline)

    @cached_property
    def config(self) -> EngineConfig:
        if self.config_path is None:
            config = EngineConfig()
        else:
            with self.config_path.open("r", encoding="utf-8") as handle:
                try:
                    raw = json.load(handle)
                except json.JSONDecodeError as exc:
                    raise ConfigurationError(f"engine config is not valid JSON: {exc}") from exc
            config = EngineConfig.from_dict(raw)

        if self.poverty_guideline is not None:
            config = replace(config, poverty_guideline=self.poverty_guideline)

        logger.info(
            "Engine config %s loaded (poverty guideline %s, %d refinance cells)",
            config.version,
            config.poverty_guideline,
            len(config.refinance_rates_pct) * len(config.refinance_terms_years),
        )
        return config
