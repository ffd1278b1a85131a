from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    csv_path: str = os.getenv(
        "PITSTOPS_CSV_PATH", str((Path.cwd() / "data" / "results_pitstops.csv").resolve())
    )
    log_level: str = os.getenv("PITSTOPS_LOG_LEVEL", "INFO")
    cache_ttl_seconds: int = int(os.getenv("PITSTOPS_CACHE_TTL", "600"))


def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
