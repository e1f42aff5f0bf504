"""
Configuration management for the Game Reviews API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Data
    seed_data_path: str | None = None  # YAML file replacing the built-in seed

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GAMEREVIEWS_"
        case_sensitive = False


# Global settings instance
settings = Settings()
