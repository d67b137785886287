from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

from asserting_that.verbose import setup_logger


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    debug_file: str | None = None
    verbose: bool = False
    logger_name: str = "asserting_that"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"

    @field_validator("debug_file")
    @classmethod
    def expand_env_variables(cls, v: str | None) -> str | None:
        """Expand ${VAR} and ${VAR:-default}; unset variables without a default are an error."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception:
            raise ValueError(f"debug_file '{v}' references an unset environment variable")


class AssertingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    logging: LoggingConfig = LoggingConfig()


def load_config(path: Path) -> AssertingConfig:
    """Load and validate an asserting-that config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(raw).__name__}")

    config = AssertingConfig(**raw)

    # Resolve a relative debug_file relative to the config file location
    debug_file = config.logging.debug_file
    if debug_file is not None and not Path(debug_file).is_absolute():
        config.logging.debug_file = str((config_dir / debug_file).resolve())

    return config


def configure_logging(config: AssertingConfig) -> logging.Logger | None:
    """Attach the handlers described by ``config``; no-op without a debug_file."""
    settings = config.logging
    if settings.debug_file is None:
        return None
    return setup_logger(
        Path(settings.debug_file),
        verbose=settings.verbose,
        logger_name=settings.logger_name,
        level=settings.level,
    )
