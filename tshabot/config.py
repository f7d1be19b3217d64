"""Runtime configuration, read once from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    openai_api_key: str
    jwt_secret: str = ""
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    openai_base_url: str = DEFAULT_OPENAI_BASE_URL
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # keep secrets out of tracebacks and log lines
        return (
            f"Settings(port={self.port}, host={self.host!r}, "
            f"openai_base_url={self.openai_base_url!r}, log_level={self.log_level!r})"
        )


def load_settings(env_file: str | None = None) -> Settings:
    """Build Settings from the process environment.

    Raises ConfigError if OPENAI_API_KEY is missing, or if PORT is not a number.
    JWT_SECRET is read but not enforced here: without it /api/init answers 500
    and every protected call answers 401.
    """
    load_dotenv(env_file)

    api_key = os.getenv("OPENAI_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("OPENAI_API_KEY environment variable is not set")

    raw_port = os.getenv("PORT") or str(DEFAULT_PORT)
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw_port!r}")

    return Settings(
        openai_api_key=api_key,
        jwt_secret=os.getenv("JWT_SECRET", ""),
        port=port,
        host=os.getenv("HOST") or DEFAULT_HOST,
        openai_base_url=(os.getenv("OPENAI_BASE_URL") or DEFAULT_OPENAI_BASE_URL).rstrip("/"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
