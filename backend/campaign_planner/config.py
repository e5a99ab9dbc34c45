from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic Settings.
    Environment variables are loaded from .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Storage
    database_path: Path = Path(__file__).parent.parent / "data" / "campaigns.db"

    # Demo data
    mock_campaign_count: int = 3  # Hybrid listing tops user campaigns up to this many
    analytics_campaign_count: int = 8
    analytics_window_days: int = Field(30, gt=0)
    top_campaigns_limit: int = 5

    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.api_cors_origins.split(",")]


# Global settings instance
def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()


settings = get_settings()
