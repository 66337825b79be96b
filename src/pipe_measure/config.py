"""
Configuration settings for the pipe measurement service.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_PIPE_COLOR


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PIPES_", env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 4000
    reload: bool = False
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Pipes
    default_color: str = DEFAULT_PIPE_COLOR
    seed_pipes: int = 0  # generated pipes loaded at startup
    seed: int | None = None


# Global settings instance
settings = Settings()
