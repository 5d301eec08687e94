"""Configuration management for studytrack."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    environment: str = Field(default="development", description="Deployment environment name reported to Logfire")

    # Startup data
    seed_demo_data: bool = Field(default=True, description="Load the demo dataset into the store at startup")

    # Dashboard Configuration
    upcoming_window_days: int = Field(
        default=7, ge=0, description="Window (in days) used for the upcoming deadlines view"
    )
    dashboard_upcoming_limit: int = Field(
        default=5, ge=1, description="Maximum number of upcoming deadlines shown on the dashboard"
    )
    dashboard_exam_limit: int = Field(default=3, ge=1, description="Maximum number of upcoming exams on the dashboard")


# Application Constants
class Constants:
    """Application-wide constants."""

    # Progress bounds
    PROGRESS_MIN: int = 0
    PROGRESS_MAX: int = 100

    # Deadline proximity bands (hours / days until deadline)
    PROXIMITY_HOURS_URGENT: int = 24
    PROXIMITY_DAYS_SOON: int = 3
    PROXIMITY_DAYS_WEEK: int = 7

    # Deadline proximity points
    SCORE_OVERDUE: int = 40
    SCORE_UNDER_24_HOURS: int = 35
    SCORE_UNDER_3_DAYS: int = 25
    SCORE_UNDER_7_DAYS: int = 15
    SCORE_LATER: int = 5

    # Progress bands (upper bound exclusive -> points)
    PROGRESS_BANDS: tuple[tuple[int, int], ...] = ((25, 20), (50, 15), (75, 10))

    # Category weights (higher = more important)
    CATEGORY_WEIGHTS: dict[str, int] = {
        "Exam Prep": 10,
        "Continuous Assessment": 9,
        "Project Task": 8,
        "Hackathon": 8,
        "Lab File": 7,
        "Assignment": 6,
        "PPT": 5,
        "Homework": 4,
    }
    DEFAULT_CATEGORY_WEIGHT: int = 5

    # Score to level thresholds
    PRIORITY_CRITICAL_MIN: int = 50
    PRIORITY_HIGH_MIN: int = 35
    PRIORITY_MEDIUM_MIN: int = 20


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
