"""
Configuration settings for AI CLI Tool.

This module provides configuration management using Pydantic settings
with support for environment variables and a local .env file.
"""

from typing import Any, Dict
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


CONFIG_FILE_NAME = ".ai-cli-tool-config.json"
DEFAULT_API_BASE_URL = "https://api.openai.com/v1"


def default_config_file() -> Path:
    """Per-user location of the credential file."""
    return Path.home() / CONFIG_FILE_NAME


class AiCliSettings(BaseSettings):
    """
    Main configuration settings for AI CLI Tool.
    
    Settings are loaded from multiple sources in order of preference:
    1. Environment variables (prefixed with AI_CLI_TOOL_)
    2. A .env file in the working directory
    3. Default values
    
    The API key itself is not a setting; it lives in the credential file
    written by the ``set-key`` command.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="AI_CLI_TOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # API Configuration
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the OpenAI-compatible API"
    )
    
    timeout: float = Field(
        default=60.0,
        description="Request timeout in seconds",
        gt=0
    )
    
    # Credential Configuration
    config_file: Path = Field(
        default_factory=default_config_file,
        description="Path of the JSON file holding the API key"
    )
    
    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )
    
    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )
    
    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate and normalize the API base URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid API base URL '{v}'. It must start with http:// or https://")
        return v.rstrip("/")
    
    @field_validator("config_file")
    @classmethod
    def expand_config_file(cls, v: Path) -> Path:
        """Expand a leading ~ in the credential file path."""
        return v.expanduser()
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper
    
    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a plain dictionary."""
        data = self.model_dump()
        data["config_file"] = str(self.config_file)
        return data


def get_settings() -> AiCliSettings:
    """Get the current AI CLI Tool settings."""
    return AiCliSettings()
