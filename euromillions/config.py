"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./euromillions.db"

    # App
    APP_NAME: str = "EuroMillions Draw Generator"
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_DIR: Path = Path("logs")

    # Historical data file (delimited text, most recent draw first)
    DATA_FILE: Path | None = None
    CSV_SEPARATOR: str = ";"
    CSV_HAS_HEADER: bool = True
    CSV_DATE_FORMAT: str = "%d/%m/%Y"

    # Game rules
    MAX_NUMBER: int = 50
    DRAW_SIZE: int = 5
    MAX_STAR: int = 12
    STAR_COUNT: int = 2

    # Analysis
    DISTANCE_WINDOW: int = 146
    DISTANCE_PERCENTAGE: int = 80

    # Generation
    MAX_ATTEMPTS: int = 1000
    PAUSE_EVERY: int = 10
    PAUSE_SECONDS: float = 0.1
    PREDECESSOR_TOP_FRACTION: float = 0.7
    PREDECESSOR_MAX_RATIO: float = 0.8


settings = Settings()
