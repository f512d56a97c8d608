"""
Rocks API — Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (logging level, app title) and __main__.py (bind address).
When:  Loaded once at module import time.

Environment:
    PORT       Listening port (default 3000)
    HOST       Bind address (default 0.0.0.0)
    LOG_LEVEL  DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
    APP_NAME   Title shown in the OpenAPI docs and startup banner
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a default, so the service starts with no configuration
    at all and listens on port 3000.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # What: Port uvicorn binds to
    # Env:  PORT (the only variable most deployments ever set)
    port: int = Field(default=3000, ge=1, le=65535)
    host: str = Field(default="0.0.0.0")

    app_name: str = Field(default="Rocks API")

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
