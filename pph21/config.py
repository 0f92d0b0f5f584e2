from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ConfigDict, field_validator

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}
MAX_INCOME = 10**15


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


class Settings(BaseModel):
    log_level: str = Field(default_factory=lambda: os.getenv("PPH21_LOG_LEVEL", "WARNING"))
    log_dir: str | None = Field(default_factory=lambda: os.getenv("PPH21_LOG_DIR"))
    strict_convergence: bool = Field(
        default_factory=lambda: _env_bool("PPH21_STRICT_CONVERGENCE", False)
    )
    max_income: int = Field(default_factory=lambda: int(os.getenv("PPH21_MAX_INCOME", str(MAX_INCOME))))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        upper = (value or "WARNING").upper()
        if not isinstance(logging.getLevelName(upper), int):
            raise ValueError(f"PPH21_LOG_LEVEL must be a logging level name, got {upper}")
        return upper

    @field_validator("max_income")
    @classmethod
    def _validate_max_income(cls, value: int) -> int:
        if not 0 < value <= MAX_INCOME:
            raise ValueError(f"PPH21_MAX_INCOME must be between 1 and {MAX_INCOME}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
