"""Configuration management for PlateLog."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Reviewer account whose "@handle APPROVED" marker counts as approval
    reviewer_handle: str = Field("diningwithtaha", description="Reviewer's own social handle")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Analysis settings
    min_word_count: int = Field(2, description="Minimum occurrences for a word to be reported")
    unknown_restaurant_name: str = Field("Unknown Restaurant", description="Fallback restaurant name")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "PLATELOG_"


# Global settings instance
settings = Settings()
