from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import streamlit as st

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "settings.json"
ENV_DATA_DIR = "SALES_APP_DATA_DIR"
ENV_CURRENCY = "SALES_APP_CURRENCY"
ENV_DEFAULT_LAT = "SALES_APP_DEFAULT_LAT"
ENV_DEFAULT_LON = "SALES_APP_DEFAULT_LON"
SESSION_DATA_DIR = "sales_app_data_dir"

# Kampala
DEFAULT_LATITUDE = 0.3136
DEFAULT_LONGITUDE = 32.5811


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    db_path: Path
    currency: str = "UGX"
    default_latitude: float = DEFAULT_LATITUDE
    default_longitude: float = DEFAULT_LONGITUDE


def _default_data_dir() -> Path:
    return Path.home() / ".sales_recorder"


def _load_persisted_settings(data_dir: Path) -> dict:
    cfg = data_dir / CONFIG_FILE_NAME
    if cfg.exists():
        try:
            return json.loads(cfg.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable %s: %s", cfg, e)
            return {}
    return {}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, raw)
        return default


def persist_data_dir(data_dir_str: str, *, default_dir: Optional[Path] = None) -> Path:
    data_dir = Path(data_dir_str).expanduser().resolve()
    data_dir.mkdir(parents=True, exist_ok=True)

    # Written to the default folder so the choice survives restarts.
    home_dir = default_dir or _default_data_dir()
    home_dir.mkdir(parents=True, exist_ok=True)
    cfg = home_dir / CONFIG_FILE_NAME
    cfg.write_text(json.dumps({"data_dir": str(data_dir)}, indent=2), encoding="utf-8")
    return data_dir


def resolve_settings(session_data_dir: Optional[str] = None, *, default_dir: Optional[Path] = None) -> Settings:
    # Priority order:
    # 1) Session state (set via Data Management page)
    # 2) Environment variable
    # 3) Persisted settings in default folder
    # 4) Default folder
    if session_data_dir:
        data_dir = Path(session_data_dir).expanduser().resolve()
    elif os.getenv(ENV_DATA_DIR):
        data_dir = Path(os.getenv(ENV_DATA_DIR, "")).expanduser().resolve()
    else:
        default_dir = default_dir or _default_data_dir()
        persisted = _load_persisted_settings(default_dir)
        data_dir = Path(persisted.get("data_dir", default_dir)).expanduser().resolve()

    data_dir.mkdir(parents=True, exist_ok=True)
    return Settings(
        data_dir=data_dir,
        db_path=data_dir / "sales.db",
        currency=os.getenv(ENV_CURRENCY) or "UGX",
        default_latitude=_env_float(ENV_DEFAULT_LAT, DEFAULT_LATITUDE),
        default_longitude=_env_float(ENV_DEFAULT_LON, DEFAULT_LONGITUDE),
    )


def get_settings() -> Settings:
    return _cached_settings(st.session_state.get(SESSION_DATA_DIR))


@st.cache_resource
def _cached_settings(session_data_dir: Optional[str]) -> Settings:
    return resolve_settings(session_data_dir)
