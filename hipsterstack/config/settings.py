"""Centralized configuration with environment-variable overrides."""
from dataclasses import dataclass
import os

def _env(key: str, default: str) -> str:
    """Read an environment variable with a fallback."""
    return os.getenv(key, default)

def _env_int(key: str, default: int) -> int:
    """Read an integer env var with fallback."""
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default

@dataclass(frozen=True)
class Settings:
    """Application settings (override via env vars)."""
    app_name: str
    log_level: str
    request_timeout_seconds: int

    hipster_base_url: str
    hipster_source: str

    stack_exchange_base_url: str
    default_site: str

    @staticmethod
    def from_env() -> "Settings":
        """Build settings from environment variables."""
        return Settings(
            app_name=_env("APP_NAME", "hipsterstack"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            request_timeout_seconds=_env_int("REQUEST_TIMEOUT_SECONDS", 30),

            hipster_base_url=_env("HIPSTER_BASE_URL", "http://hipsterjesus.com"),
            hipster_source=_env("HIPSTER_SOURCE", "remote").lower(),

            stack_exchange_base_url=_env("STACK_EXCHANGE_BASE_URL", "https://api.stackexchange.com/2.3"),
            default_site=_env("STACK_EXCHANGE_SITE", "stackoverflow"),
        )
