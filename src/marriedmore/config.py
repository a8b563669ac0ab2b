"""Environment-driven settings for the Streamlit page."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

SUPPORTED_LANGS = ("ko", "en")


@dataclass(frozen=True)
class AppConfig:
    forced_lang: str | None  # None = detect from the browser
    log_level: int


def load_config() -> AppConfig:
    lang = os.getenv("MARRIEDMORE_LANG", "").strip().lower()
    level_name = os.getenv("MARRIEDMORE_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(level_name)

    return AppConfig(
        forced_lang=lang if lang in SUPPORTED_LANGS else None,
        log_level=level if isinstance(level, int) else logging.INFO,
    )


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
