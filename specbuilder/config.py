"""
Spec builder configuration definition.

Loads configuration from environment variables (and .env) via pydantic-settings.
Only the CLI reads this; the builder core takes everything as arguments.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import DEFAULT_LOG_CONFIG_PATH


class SpecBuilderConfig(BaseSettings):
    """
    Configuration for the spec builder CLI.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default=str(DEFAULT_LOG_CONFIG_PATH), description="Logging dictConfig YAML path"
    )

    # ===== Build Defaults =====
    SPEC_PATH: str = Field(default="f.yml", description="Abstract spec (f.yml) path")
    OUTPUT_PATH: str = Field(default="template.yml", description="Generated template path")
    OUTPUT_VARIANT: Literal["ros", "component"] = Field(
        default="ros", description="Output variant"
    )
    USER_ENV_PREFIX: str = Field(
        default="UDEV_", description="Prefix of env vars injected into every function"
    )
    ACCESS: str = Field(
        default="default", description="Credential alias used when the provider names none"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )
