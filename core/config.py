"""Environment-sourced settings for the generation endpoint."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from core.errors import ConfigurationError

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT_S = 20.0

API_KEY_ENV = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")
MODEL_ENV = ("MODEL_NAME", "GEMINI_MODEL")
SECRET_ENV = ("SHARED_SECRET", "SITE_SECRET")
MAX_NAME_LENGTH = 80
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty environment value."""
    if explicit and explicit.strip():
        return explicit.strip()
    return _first_env(*env_names)


def _first_env(*names: str) -> str:
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}.") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive.")
    return value


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    shared_secret: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S
    language: str = "bn"
    default_target_name: str = "Shrabani"
    default_sender_name: str = "Tarunjit"
    allowed_origin: str = "*"
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # Credentials stay out of logs and tracebacks.
        return (
            f"Settings(model={self.model!r}, api_key_set={bool(self.api_key)}, "
            f"secret_set={bool(self.shared_secret)}, timeout_s={self.timeout_s}, "
            f"language={self.language!r})"
        )


def load_settings(api_key: str | None = None) -> Settings:
    """Load settings from the process environment and an optional .env file."""
    load_dotenv()
    return Settings(
        api_key=resolve_api_key(api_key, *API_KEY_ENV),
        model=_first_env(*MODEL_ENV) or DEFAULT_MODEL,
        shared_secret=_first_env(*SECRET_ENV),
        timeout_s=_float_env("GENERATION_TIMEOUT", DEFAULT_TIMEOUT_S),
        language=(_first_env("PROMPT_LANGUAGE") or "bn").lower(),
        default_target_name=_name_env("DEFAULT_TARGET_NAME", "Shrabani"),
        default_sender_name=_name_env("DEFAULT_SENDER_NAME", "Tarunjit"),
        allowed_origin=_first_env("ALLOWED_ORIGIN") or "*",
        log_level=_log_level_env(),
    )


def _name_env(name: str, default: str) -> str:
    value = _first_env(name) or default
    if len(value) > MAX_NAME_LENGTH:
        raise ConfigurationError(f"{name} must be at most {MAX_NAME_LENGTH} characters.")
    return value


def _log_level_env() -> str:
    level = (_first_env("LOG_LEVEL") or "INFO").upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}.")
    return level
