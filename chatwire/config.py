"""Configuration management with Pydantic Settings + optional YAML."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatwire.utils.platform import get_config_dir


class DecodePolicy(str, Enum):
    """How component failures are handled while decoding a message.

    LENIENT replaces a failing component with a placeholder at the same
    position and keeps going. STRICT fails the whole decode on the first
    unrecognized or malformed component.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class DecoderConfig(BaseModel):
    policy: DecodePolicy = DecodePolicy.LENIENT
    log_placeholders: bool = True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHATWIRE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    decoder: DecoderConfig = Field(default_factory=DecoderConfig)
    log_level: str = "INFO"
    log_json: bool = False


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from env vars, optionally overlaying a YAML config."""
    yaml_data: dict[str, Any] = {}

    # Determine config file path
    if config_path is None:
        config_path = os.environ.get("CHATWIRE_CONFIG")
    if config_path is None:
        default = get_config_dir() / "config.yaml"
        if default.exists():
            config_path = default

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                yaml_data = yaml.safe_load(f) or {}

    # YAML values are init kwargs; pydantic-settings gives those priority over env
    return Settings(**yaml_data)
