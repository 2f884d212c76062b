"""
Quotes API - Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Values are read from environment variables (or a .env file), coerced
       to their declared types and validated once at import time. The
       module-level `settings` object is shared by every other module.

Environment variables (case-insensitive):
    DATABASE_URL       Async SQLAlchemy URL (sqlite+aiosqlite, postgresql+asyncpg)
    API_PASSWORD       Shared secret required in the `api-password` header
    SEED_ON_STARTUP    Fill an empty quotes table from SEED_FILE at startup
    LOG_LEVEL          DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_SEED_FILE = str(Path(__file__).parent / "data" / "seed_quotes.json")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a development default. Production deployments must at
    least set API_PASSWORD, otherwise every write request is rejected.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: sqlite+aiosqlite:///path/to.db or postgresql+asyncpg://user:pw@host/db
    database_url: str = Field(
        default="sqlite+aiosqlite:///./quotes.db",
        description="Async SQLAlchemy connection URL",
    )

    # Pool sizing only applies to server databases; SQLite opens a
    # connection per session.
    db_pool_size: int = Field(default=5, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── Seeding ───────────────────────────────────────────────────────────
    seed_on_startup: bool = Field(default=True)
    seed_file: str = Field(default=DEFAULT_SEED_FILE)
    # Rows per INSERT statement when seeding; keeps statements under driver
    # parameter limits.
    seed_batch_size: int = Field(default=50, ge=1, le=500)

    # ── Authentication ────────────────────────────────────────────────────
    # Compared against the `api-password` header on POST, PUT and DELETE.
    api_password: str = Field(default="")

    # ── SVG cards ─────────────────────────────────────────────────────────
    # Cache lifetime for /quotes/{id}/svg. Random cards are never cached.
    svg_cache_max_age: int = Field(default=86_400, ge=0)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list of origins; "*" allows any origin.
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> list[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def validate_required_for_production(self) -> None:
        """
        Checks settings that the service cannot work properly without.

        Called from the application lifespan. Raises ValueError listing
        every problem found.
        """
        errors = []
        if not self.api_password:
            errors.append(
                "API_PASSWORD is not set. "
                "Protected endpoints (POST, PUT, DELETE) will reject every request."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


settings = Settings()
