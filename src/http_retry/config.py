"""
Configuration settings for the HTTP retry layer.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "HTTP Retry"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # "production" switches logs to JSON
    
    # === HTTP Transport ===
    HTTP_BASE_URL: str = ""
    HTTP_TIMEOUT: float = 30.0  # seconds
    HTTP_MAX_CONNECTIONS: int = 10
    HTTP_MAX_KEEPALIVE_CONNECTIONS: int = 5
    
    # === Retry ===
    MAX_RETRIES: int = 3
    RETRY_DELAYS: list[float] = [1.0, 3.0, 5.0]  # seconds per attempt, last one repeats
    RETRY_LOG_PRINT: bool = False  # Also emit the one-line retry message through the logger
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
