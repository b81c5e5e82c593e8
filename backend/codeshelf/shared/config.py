"""Centralized configuration for the snippet sharing service."""

from typing import List, Literal

import dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

dotenv.load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Application environment"
    )
    app_url: str = Field(
        default="http://localhost:3000",
        description="Public base URL used to build share links",
    )
    site_name: str = Field(
        default="Code Snippets Platform", description="Display name of the site"
    )

    api_debug: bool = Field(default=True, description="Enable debug mode")
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=5000, description="API port")

    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    secret_key: str = Field(
        default="your-super-secret-jwt-key-change-this-in-production",
        description="Secret key used to sign auth tokens",
    )
    jwt_algorithm: str = Field(default="HS256", description="Token signing algorithm")
    jwt_expires_days: int = Field(
        default=7, description="Lifetime of issued auth tokens in days"
    )
    password_hash_iterations: int = Field(
        default=260_000, description="PBKDF2 rounds used for new password hashes"
    )

    storage_backend: Literal["memory", "mongodb"] = Field(
        default="memory", description="Persistence adapter for users and snippets"
    )
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI",
    )
    mongodb_db_name: str = Field(default="codeshelf", description="MongoDB database name")

    seed_demo_data: bool = Field(
        default=True, description="Load demo users, tags and snippets into an empty store"
    )
    auto_analyze_complexity: bool = Field(
        default=True,
        description="Fill in a snippet's time complexity from the analyzer when omitted",
    )
    max_code_length: int = Field(default=50_000, description="Maximum snippet size")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string if needed."""
        if isinstance(self.cors_origins, str):
            return [origin.strip() for origin in self.cors_origins.split(",")]
        return self.cors_origins


settings = Settings()
