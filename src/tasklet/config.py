# src/tasklet/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- The only external input is the task file path; everything has a default.
- Local overrides via config_local.py stay possible without touching env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLET"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load a local .env (never overrides variables already set)."""
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklet").strip() or "tasklet"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklet"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.txt")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            console_enabled=console_enabled,
            data_dir=data_dir,
            tasks_path=tasks_path,
        )


def _apply_local_overrides(settings: Settings) -> Settings:
    # Prefer .env; config_local.py is for safe per-machine overrides only.
    try:
        import config_local as _config_local  # type: ignore
    except ImportError:
        return settings

    if hasattr(_config_local, "CONSOLE_ENABLED"):
        object.__setattr__(settings, "console_enabled", bool(_config_local.CONSOLE_ENABLED))
    if hasattr(_config_local, "TASKS_PATH"):
        object.__setattr__(settings, "tasks_path", Path(_config_local.TASKS_PATH).expanduser())
    if hasattr(_config_local, "LOG_LEVEL"):
        object.__setattr__(settings, "log_level", str(_config_local.LOG_LEVEL))
    return settings


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Build settings on first use (reads .env, env vars, then config_local.py)."""
    global _SETTINGS
    if _SETTINGS is None:
        _load_dotenv()
        _SETTINGS = _apply_local_overrides(Settings.from_env())
    return _SETTINGS
