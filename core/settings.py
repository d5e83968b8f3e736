"""Application settings and environment configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
import os
from functools import lru_cache

from dotenv import load_dotenv


@dataclass
class Settings:
    """Runtime configuration resolved from environment variables."""

    port: int = 3000
    host: str = "0.0.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        env_port = os.getenv("PORT")
        env_host = os.getenv("HOST")
        env_environment = os.getenv("APP_ENV")
        env_log_level = os.getenv("LOG_LEVEL")
        if env_port:
            self.port = _parse_port(env_port)
        if env_host:
            self.host = env_host
        if env_environment:
            self.environment = env_environment.lower()
        if env_log_level:
            self.log_level = env_log_level.upper()

    @property
    def is_test(self) -> bool:
        """Whether the process runs under the test harness."""

        return self.environment == "test"


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer, got {value!r}") from exc
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance, reading ``.env`` first."""

    load_dotenv()
    return Settings()
