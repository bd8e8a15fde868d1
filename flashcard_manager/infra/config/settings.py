"""
Application configuration settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"], case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("Flashcard Manager API", alias="APP_NAME")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8080, alias="PORT")

    # Database
    database_url: str = Field(
        "sqlite+aiosqlite:///./flashcards.db", alias="DATABASE_URL"
    )
    debug_sql: bool = Field(False, alias="DATABASE_ECHO")

    # Redis / event stream
    redis_url: str = Field("redis://localhost:6379", alias="REDIS_URL")
    redis_socket_timeout: float = Field(5.0, alias="REDIS_SOCKET_TIMEOUT")
    events_enabled: bool = Field(True, alias="EVENTS_ENABLED")
    events_stream: str = Field("flashcards.events", alias="EVENTS_STREAM")
    events_stream_maxlen: int = Field(10000, alias="EVENTS_STREAM_MAXLEN")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # Observability
    tracing_enabled: bool = Field(True, alias="OTEL_ENABLED")
    otel_service_name: str = Field("flashcard-manager", alias="OTEL_SERVICE_NAME")
    otel_exporter_otlp_endpoint: str = Field("", alias="OTEL_EXPORTER_OTLP_ENDPOINT")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    # CLI client
    api_url: str = Field("http://localhost:8080", alias="FLASHCARDS_API_URL")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
