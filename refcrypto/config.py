from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Logging
    log_level: str = Field(default="WARNING", description="Level passed to configure_logging()")

    # Chaining modes
    parallel_workers: int = Field(
        default=1,
        ge=0,
        le=64,
        description="Thread workers for ECB and CBC decipher; 0 or 1 means sequential",
    )
    parallel_min_blocks: int = Field(default=64, ge=1, description="Smallest input (in blocks) dispatched to the pool")

    # DES key schedule
    cache_key_schedule: bool = Field(default=True)
    key_schedule_cache_size: int = Field(default=256, ge=1, le=65536)

    # Evaluation helpers
    global_seed: int = Field(default=1337)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    def _bool(name: str, default: bool) -> bool:
        v = os.getenv(name)
        if v is None:
            return default
        return v.strip().lower() in {"1", "true", "yes", "y", "on"}

    return Settings(
        log_level=os.getenv("REFCRYPTO_LOG_LEVEL", "WARNING"),
        parallel_workers=int(os.getenv("REFCRYPTO_PARALLEL_WORKERS", "1")),
        parallel_min_blocks=int(os.getenv("REFCRYPTO_PARALLEL_MIN_BLOCKS", "64")),
        cache_key_schedule=_bool("REFCRYPTO_CACHE_KEY_SCHEDULE", True),
        key_schedule_cache_size=int(os.getenv("REFCRYPTO_KEY_SCHEDULE_CACHE_SIZE", "256")),
        global_seed=int(os.getenv("REFCRYPTO_GLOBAL_SEED", "1337")),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a basic stderr handler at ``level`` (or the configured level)."""
    logging.basicConfig(
        level=(level or load_settings().log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
