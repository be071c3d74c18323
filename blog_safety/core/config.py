"""Configuration for the blog safety service."""
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SafetySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SAFETY_", env_file=".env", env_file_encoding="utf-8"
    )

    app_name: str = Field(default="Blog Safety Service", description="Service name")
    api_prefix: str = Field(default="/api", description="Base API prefix")
    environment: str = Field(default="development", description="Runtime environment tag")
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(
        default="console", description="Log renderer: 'console' or 'json'"
    )
    restricted_usernames: list[str] = Field(
        default_factory=lambda: [
            "admin",
            "administrator",
            "eldrex",
            "bula",
            "delos reyes",
            "moderator",
            "system",
            "root",
            "superuser",
        ]
    )
    username_max_length: int = Field(
        default=30, description="Longest display name a reader may choose"
    )
    anonymous_name: str = Field(
        default="Anonymous", description="Author name used when a reader has none"
    )
    max_comment_length: int = Field(
        default=5000, description="Upper bound on submitted comment text"
    )


@lru_cache()
def get_settings() -> SafetySettings:
    """Return service settings."""
    return SafetySettings()
