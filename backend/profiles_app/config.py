"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""
    
    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "profiles_app"
    
    # Connection pool
    mongo_max_pool_size: int = 10
    mongo_min_pool_size: int = 0
    mongo_max_wait_ms: int = 5000
    
    # Logging
    log_level: str = "INFO"
    
    # Local API
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
