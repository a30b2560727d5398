"""Application configuration"""
import logging
import os
from typing import Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

DEFAULT_DEPARTMENTS: Tuple[str, ...] = (
    "IT",
    "Accounts",
    "Material",
    "HR",
    "Production",
    "Refinery Engg",
    "CGPP engg",
    "Civil",
    "Mechanical Engg",
    "Electrical Engg",
    "Instrument",
    "Technical",
    "WCM",
    "Safety",
)


class Settings(BaseModel):
    """Immutable service settings, read once from the environment"""
    model_config = ConfigDict(frozen=True)

    departments: Tuple[str, ...] = DEFAULT_DEPARTMENTS
    database_url: str
    db_echo: bool = False
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 24 * 60
    permissions_file: str | None = None
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("http://localhost:5173",)


def _split(value: str | None) -> Tuple[str, ...]:
    if not value:
        return ()
    # Duplicates dropped, first occurrence wins
    return tuple(dict.fromkeys(item.strip() for item in value.split(",") if item.strip()))


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    return (
        f"postgresql+asyncpg://{os.getenv('DB_USER')}:{os.getenv('DB_PASSWORD')}"
        f"@{os.getenv('DB_HOST', 'localhost')}:{os.getenv('DB_PORT', '5432')}/{os.getenv('DB_NAME')}"
    )


def load_settings() -> Settings:
    """Build settings from environment variables (after .env is loaded)."""
    return Settings(
        departments=_split(os.getenv("DEPARTMENTS")) or DEFAULT_DEPARTMENTS,
        database_url=_database_url(),
        db_echo=os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes"),
        jwt_secret=os.getenv("JWT_SECRET", "change-me"),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", str(24 * 60))),
        permissions_file=os.getenv("PERMISSIONS_FILE"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cors_origins=_split(os.getenv("CORS_ORIGINS")) or ("http://localhost:5173",),
    )


def setup_logging(level: str = "INFO") -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


settings = load_settings()
