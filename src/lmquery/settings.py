# src/lmquery/settings.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidArguments


class Settings(BaseSettings):
    # server
    HOST: str = Field(default="localhost")
    PORT: int = Field(default=1234, gt=0, lt=65536)
    MODEL: str = Field(default="local-model")

    # context budget (~4 chars per token)
    MAX_TOKENS: int = Field(default=100000, gt=0)
    ESCAPE_INTERPOLATION: bool = Field(default=True)

    # timeouts (seconds)
    PROBE_TIMEOUT: float = Field(default=3.0, gt=0)
    REQUEST_TIMEOUT: float = Field(default=300.0, gt=0)

    # logging
    LOG_FILE: Optional[str] = None
    VERBOSE: bool = Field(default=False)

    # LMQUERY_HOST, LMQUERY_PORT, ... or a root-level .env
    model_config = SettingsConfigDict(
        env_prefix="LMQUERY_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def base_url(self) -> str:
        return f"http://{self.HOST}:{self.PORT}"


def _load_yaml(config_path: str) -> Dict[str, Any]:
    path = Path(config_path)
    if not path.is_file():
        raise InvalidArguments(f"Config file not found: {config_path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidArguments(f"Config file is not valid YAML: {config_path} ({e})") from e
    if not isinstance(data, dict):
        raise InvalidArguments(f"Config file must contain a mapping: {config_path}")
    return {str(k).upper(): v for k, v in data.items()}


def load_settings(config_path: Optional[str] = None, **overrides: Any) -> Settings:
    """Build Settings: CLI overrides > YAML file > environment > defaults.

    Override keys are matched case-insensitively against the field names and
    ``None`` values are skipped so unset CLI flags do not mask lower layers.
    """
    values: Dict[str, Any] = _load_yaml(config_path) if config_path else {}
    values.update({k.upper(): v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**values)
    except ValidationError as e:
        raise InvalidArguments(f"Invalid configuration: {e}") from e
