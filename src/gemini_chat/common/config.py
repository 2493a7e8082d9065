"""Runtime settings: API key from the environment plus optional YAML overrides."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from gemini_chat.common.errors import MissingApiKeyError

API_KEY_ENV = "AI_API_KEYS"
CFG_PATH_ENV = "GEMINI_CHAT_CFG"

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-pro"
DEFAULT_TIMEOUT_S = 120.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout_s: float = DEFAULT_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(cfg_path: str | None = None, *, load_env_file: bool = True) -> Settings:
    """
    Build settings from the environment, an optional YAML file and defaults.

    Environment variables win over the YAML file, which wins over defaults.

    Args:
        cfg_path: YAML config path; falls back to $GEMINI_CHAT_CFG when unset.
        load_env_file: Read a local `.env` first (never overrides the real env).

    Raises:
        MissingApiKeyError: $AI_API_KEYS is unset or empty.
        FileNotFoundError: an explicit config path doesn't exist.
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    def getenv(key: str) -> str | None:
        v = os.getenv(key)
        if v is None or v.strip() == "":
            return None
        return v.strip()

    api_key = getenv(API_KEY_ENV)
    if api_key is None:
        raise MissingApiKeyError(f"{API_KEY_ENV} environment variable is not set")

    cfg_path = cfg_path or getenv(CFG_PATH_ENV)
    if cfg_path and not Path(cfg_path).exists():
        raise FileNotFoundError(f"Config file not found at {cfg_path}")
    cfg = load_cfg(cfg_path) if cfg_path else {}

    return Settings(
        api_key=api_key,
        base_url=getenv("GEMINI_BASE_URL") or str(cfg.get("base_url", DEFAULT_BASE_URL)),
        model=getenv("GEMINI_MODEL_ID") or str(cfg.get("model", DEFAULT_MODEL)),
        timeout_s=float(getenv("GEMINI_TIMEOUT_S") or cfg.get("timeout_s", DEFAULT_TIMEOUT_S)),
        log_level=(getenv("GEMINI_CHAT_LOG_LEVEL") or str(cfg.get("log_level", DEFAULT_LOG_LEVEL))).upper(),
    )
