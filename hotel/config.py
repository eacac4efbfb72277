"""
File: config.py
Purpose: Process-wide settings read from the environment (and an optional .env file).
"""
from functools import lru_cache

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Read-only configuration, loaded once at startup."""

    # --- Database ---
    DB_HOST: str = "localhost"
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_DATABASE: str = "hotel"
    DB_PORT: int = 3306
    DB_POOL_SIZE: int = 10
    DB_CONNECT_TIMEOUT: int = 10

    # --- HTTP server ---
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: str = "*"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def cors_origins(self):
        """CORS_ORIGINS as a list; '*' allows any origin."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def db_config(self):
        """Keyword arguments for mysql.connector connections."""
        return {
            "host": self.DB_HOST,
            "user": self.DB_USER,
            "password": self.DB_PASSWORD,
            "database": self.DB_DATABASE,
            "port": self.DB_PORT,
            "connection_timeout": self.DB_CONNECT_TIMEOUT,
            "charset": "utf8mb4",
            "collation": "utf8mb4_unicode_ci",
        }


@lru_cache
def get_settings():
    return Settings()
