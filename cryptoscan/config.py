"""
cryptoscan Configuration — pydantic-settings based.

All settings are read from CRYPTOSCAN_* environment variables or a .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Rules ──
    rule_id_offset: int = Field(
        default=0,
        ge=0,
        description="Host-assigned base for rule ids; rule id = offset + ordinal",
    )

    # ── Scanning ──
    max_documents: int = Field(
        default=500, gt=0, description="Max documents accepted per /analyze request"
    )

    # ── Server ──
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Root log level")

    model_config = {
        "env_prefix": "CRYPTOSCAN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported by other modules
settings = Settings()
