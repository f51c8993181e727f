"""
Application Settings
===================

Main application settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Annotated, Optional, List, Union
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
import json
from pathlib import Path


DEFAULT_MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists", "def_list", "abbr"]


class Settings(BaseSettings):
    """Main application settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="Markdown Preview Tool", description="Application name")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )

    # Staging Configuration
    temp_dir: Optional[Path] = Field(
        default=None, description="Staging directory (system temp directory when unset)"
    )
    temp_prefix: str = Field(default="mdp", description="Staged file name prefix")
    temp_suffix: str = Field(default=".html", description="Staged file name suffix")

    # Rendering Configuration
    markdown_extensions: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS),
        description="Python-Markdown extensions enabled for rendering",
    )

    # Preview Configuration
    preview_grace_delay: float = Field(
        default=2.0, ge=0.0, description="Seconds to wait after launching the viewer"
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Optional rotating log file")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("markdown_extensions", mode="before")
    @classmethod
    def parse_markdown_extensions(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse extensions from string or list."""
        if isinstance(v, str):
            # Handle JSON-like string: ["tables"] or ["tables", "fenced_code"]
            v = v.strip()
            if v.startswith("[") and v.endswith("]"):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            # Handle comma-separated string: "tables,fenced_code"
            return [name.strip() for name in v.split(",") if name.strip()]
        return v

    @field_validator("temp_dir")
    @classmethod
    def create_directories(cls, v: Optional[Path]) -> Optional[Path]:
        """Ensure the staging directory exists."""
        if v is not None:
            try:
                v.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ValueError(f"Cannot create staging directory {v}: {e}") from e
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="MDPREVIEW_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
