"""Runtime configuration loaded from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from chessdss.errors import ConfigError

DEFAULT_API_BASE = "https://game-theory-backend.onrender.com"
DEFAULT_REQUEST_TIMEOUT_S = 10.0
DEFAULT_LANGUAGE = "English"
DEFAULT_LOG_LEVEL = "WARNING"

ERROR_DISPLAY_MS = 3000

_ENV_PREFIX = "CHESSDSS_"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Settings the application reads once at start-up."""

    api_base: str = DEFAULT_API_BASE
    request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S
    base_minutes: int = 5
    language: str = DEFAULT_LANGUAGE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build a config from ``CHESSDSS_*`` variables.

        Unset or blank variables keep their defaults. Raises
        :class:`ConfigError` for values that cannot be parsed.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(_ENV_PREFIX + name)
            if value is None or not value.strip():
                return None
            return value.strip()

        api_base = get("API_BASE") or DEFAULT_API_BASE
        if not api_base.startswith(("http://", "https://")):
            raise ConfigError(f"{_ENV_PREFIX}API_BASE must be an http(s) URL: {api_base!r}")

        timeout = DEFAULT_REQUEST_TIMEOUT_S
        raw = get("HTTP_TIMEOUT")
        if raw is not None:
            try:
                timeout = float(raw)
            except ValueError:
                raise ConfigError(
                    f"{_ENV_PREFIX}HTTP_TIMEOUT is not a number: {raw!r}"
                ) from None
            if timeout <= 0:
                raise ConfigError(f"{_ENV_PREFIX}HTTP_TIMEOUT must be positive: {raw!r}")

        minutes = 5
        raw = get("BASE_MINUTES")
        if raw is not None:
            try:
                minutes = int(raw)
            except ValueError:
                raise ConfigError(
                    f"{_ENV_PREFIX}BASE_MINUTES is not an integer: {raw!r}"
                ) from None
            if minutes <= 0:
                raise ConfigError(f"{_ENV_PREFIX}BASE_MINUTES must be positive: {raw!r}")

        log_level = (get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"{_ENV_PREFIX}LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            api_base=api_base.rstrip("/"),
            request_timeout_s=timeout,
            base_minutes=minutes,
            language=get("LANGUAGE") or DEFAULT_LANGUAGE,
            log_level=log_level,
        )
