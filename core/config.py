import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite:///vocabpro.db"
    APP_ENV: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: str | None = None
    LOG_DIR: str = "logs"
    SQL_ECHO: bool = False
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@dataclass(frozen=True)
class LoggingConfig:
    """Where and how verbosely the app logs, decided once at startup."""

    environment: str
    platform: str
    level: str
    log_dir: Path | None
    write_files: bool

    @property
    def is_serverless(self) -> bool:
        return self.platform in SERVERLESS_PLATFORMS


SERVERLESS_PLATFORMS = {"vercel", "netlify", "aws"}


def detect_platform(environ: Mapping[str, str]) -> str:
    if environ.get("VERCEL") == "1":
        return "vercel"
    if environ.get("RENDER") == "true":
        return "render"
    if environ.get("DYNO"):
        return "heroku"
    if environ.get("NETLIFY") == "true":
        return "netlify"
    if environ.get("AWS_EXECUTION_ENV"):
        return "aws"
    return "local"


def _default_level(environment: str) -> str:
    if environment == "production":
        return "INFO"
    if environment == "test":
        return "WARNING"
    return "DEBUG"


def _is_writable(log_dir: Path) -> bool:
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        marker = log_dir / ".write-test"
        marker.write_text("test", encoding="utf-8")
        marker.unlink()
    except OSError:
        return False
    return True


def resolve_logging_config(settings: Settings, environ: Mapping[str, str] | None = None) -> LoggingConfig:
    environ = os.environ if environ is None else environ
    platform = detect_platform(environ)
    environment = settings.APP_ENV
    level = (settings.LOG_LEVEL or _default_level(environment)).upper()

    log_dir: Path | None = None
    write_files = False
    # read-only filesystems on serverless targets
    if platform not in SERVERLESS_PLATFORMS and environment != "test":
        log_dir = Path(settings.LOG_DIR).resolve()
        write_files = _is_writable(log_dir)

    return LoggingConfig(
        environment=environment,
        platform=platform,
        level=level,
        log_dir=log_dir if write_files else None,
        write_files=write_files,
    )


settings = Settings()
