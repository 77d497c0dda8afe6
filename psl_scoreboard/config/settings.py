import logging
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PSL_TEAMS = [
    "Mamelodi Sundowns",
    "Kaizer Chiefs",
    "Orlando Pirates",
    "SuperSport United",
    "Cape Town City",
    "Stellenbosch",
    "Sekhukhune United",
    "Maritzburg United",
    "Moroka Swallows",
    "Chippa United",
    "Richards Bay",
    "Golden Arrows",
    "AmaZulu",
    "Polokwane City",
    "Black Leopards",
    "Tuks",
]

VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # League Configuration
    seed_default_teams: bool = Field(
        True, description="Seed the default PSL teams before processing results."
    )
    default_teams: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PSL_TEAMS),
        description="Team names seeded when seed_default_teams is enabled (JSON list in .env).",
    )

    # Export Configuration
    export_encoding: str = Field(
        "utf-8", description="Encoding used when writing the exported ranking."
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )
    log_file: Optional[Path] = Field(
        None, description="Optional path for a rotating log file sink."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in VALID_LOG_LEVELS:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
