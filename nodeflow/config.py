"""
Configuration settings for the nodeflow engine.
"""

from pydantic_settings import BaseSettings
from typing import Optional
import logging


class Settings(BaseSettings):
    """Engine settings with environment variable support."""
    
    # Application
    APP_NAME: str = "nodeflow"
    APP_VERSION: str = "1.0.0"
    
    # Retry defaults for nodes constructed without explicit values
    DEFAULT_MAX_RETRIES: int = 1
    DEFAULT_WAIT: float = 0.0  # Seconds
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for an application embedding the engine.
    
    The engine itself only emits through module loggers and never calls
    this on import.
    
    Args:
        level: Level name overriding settings.LOG_LEVEL
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper()),
        format=settings.LOG_FORMAT,
    )
