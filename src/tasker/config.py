# src/tasker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per process, built on first use.
- No database access at import time.
- Every variable uses the TASKER_ prefix; MONGODB_URI is accepted as a fallback.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .tasks.task_models import DuplicatePolicy

ENV_PREFIX = "TASKER"

DEFAULT_MONGO_URI = "mongodb://localhost:27017/"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load .env from the working directory without overriding real env vars."""
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_optional_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Optional[Path]

    # ---- MongoDB ----
    mongo_uri: str
    db_name: str
    collection_name: str
    mongo_timeout_ms: Optional[int]

    # ---- Behaviour ----
    duplicate_policy: DuplicatePolicy

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "tasker"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_dir=_env_optional_path(_k("LOG_DIR")),
            mongo_uri=_first_env(_k("MONGO_URI"), "MONGODB_URI", default=DEFAULT_MONGO_URI)
            or DEFAULT_MONGO_URI,
            db_name=_env(_k("DB_NAME"), "tasker").strip() or "tasker",
            collection_name=_env(_k("COLLECTION"), "tasks").strip() or "tasks",
            mongo_timeout_ms=_env_optional_int(_k("MONGO_TIMEOUT_MS")),
            duplicate_policy=DuplicatePolicy.from_env(os.getenv(_k("DUPLICATES"))),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _load_dotenv()
        _SETTINGS = Settings.from_env()
    return _SETTINGS
