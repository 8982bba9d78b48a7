"""Configuration management for the DSA Tracker service."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # Sandboxed environments may not expose .env; variables are set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Supabase configuration (required)
    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: str = Field(..., description="Supabase service role key")

    # Anthropic configuration (required)
    ANTHROPIC_API_KEY: str = Field(..., description="Anthropic API key")

    # Environment
    TRACKER_ENV: str = Field(default="dev", description="Environment: dev, staging, prod")

    # Company profile generation
    PROFILE_MODEL: str = Field(
        default="claude-sonnet-4-5-20250929", description="Model for company profile generation"
    )
    PROFILE_MAX_TOKENS: int = Field(default=8000, description="Max output tokens for profile generation")
    PROFILE_TEMPERATURE: float = Field(default=0.2, description="Sampling temperature for profiles")
    ANTHROPIC_TIMEOUT_SECONDS: float = Field(
        default=120.0, description="Request timeout for Anthropic calls"
    )

    # Tables
    COMPANY_REQUIREMENTS_TABLE: str = Field(
        default="company_requirements", description="Table caching company requirement profiles"
    )
    PROBLEMS_TABLE: str = Field(default="problems", description="Table holding logged problems")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If required environment variables are missing
    """
    return Settings()
