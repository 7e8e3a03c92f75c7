from __future__ import annotations

import os
from dataclasses import dataclass

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional in minimal setups
    load_dotenv = None

if load_dotenv is not None:
    load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("HL_LOG_LEVEL", "INFO")
    metrics_enabled: bool = _env_flag("HL_METRICS_ENABLED", "true")
    max_text_chars_raw: str = os.getenv("HL_MAX_TEXT_CHARS", "100000")
    max_ranges_raw: str = os.getenv("HL_MAX_RANGES", "1000")
    api_keys_raw: str = os.getenv("HL_API_KEYS", "")
    allow_anonymous_raw: str = os.getenv("HL_ALLOW_ANONYMOUS", "true")

    @property
    def max_text_chars(self) -> int:
        return _parse_limit(os.getenv("HL_MAX_TEXT_CHARS", self.max_text_chars_raw))

    @property
    def max_ranges(self) -> int:
        return _parse_limit(os.getenv("HL_MAX_RANGES", self.max_ranges_raw))

    @property
    def api_keys(self) -> set[str]:
        raw = os.getenv("HL_API_KEYS", self.api_keys_raw)
        return {value.strip() for value in raw.split(",") if value.strip()}

    @property
    def allow_anonymous(self) -> bool:
        return _env_flag("HL_ALLOW_ANONYMOUS", self.allow_anonymous_raw)


def _parse_limit(raw: str) -> int:
    """Parse a size limit; zero, negative or malformed values disable it."""
    try:
        value = int(raw.strip())
    except ValueError:
        return 0
    return max(value, 0)


settings = Settings()
