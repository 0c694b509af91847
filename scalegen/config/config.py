from __future__ import annotations

"""Configuration loading and validation for scalegen.

This module loads YAML configuration, applies defaults, and validates
the values into a pydantic model for the CLI.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..theory.chromatic import STEPS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaults.yml")
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Configuration file missing or invalid."""


class ScaleGenConfig(BaseModel):
    """Validated CLI configuration.

    - tonic: default tonic when none is given on the command line
    - name: catalogue pattern name, used when no explicit pattern is set
    - pattern: explicit step pattern (m/M/A), takes precedence over name
    - patterns_path: optional YAML catalogue replacing the packaged one
    - log_level: root logging level
    """

    tonic: str = Field("C", min_length=1, max_length=2)
    name: Optional[str] = "major"
    pattern: Optional[str] = None
    patterns_path: Optional[str] = None
    log_level: str = "WARNING"

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and any(code not in STEPS for code in v):
            raise ValueError(f"pattern must only contain 'm', 'M' or 'A', got {v!r}")
        return v


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse config file {path}: {e}") from e


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Read the raw ``scale``/``logging`` sections for the CLI.

    Falls back to the packaged ``defaults.yml`` (tonic C, major, WARNING
    logging) when no path is given. A file whose top level is not a
    mapping is rejected with ConfigError.
    """
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    cfg = _load_yaml(cfg_path)
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config file {cfg_path} must hold a mapping, got {type(cfg).__name__}")
    return cfg


def validate_config(cfg: Dict[str, Any]) -> ScaleGenConfig:
    """Apply defaults and validate configuration values.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated configuration model.
    """
    cfg.setdefault("scale", {})
    cfg.setdefault("logging", {})
    scale_cfg = cfg["scale"] or {}
    log_cfg = cfg["logging"] or {}

    scale_cfg.setdefault("tonic", "C")
    scale_cfg.setdefault("name", "major")
    scale_cfg.setdefault("pattern", None)
    scale_cfg.setdefault("patterns_path", None)
    log_cfg.setdefault("level", "WARNING")

    level = str(log_cfg["level"]).upper()
    if level not in ALLOWED_LOG_LEVELS:
        logger.warning("Unsupported log level '%s', using 'WARNING'.", log_cfg["level"])
        level = "WARNING"

    try:
        return ScaleGenConfig(
            tonic=str(scale_cfg["tonic"]),
            name=scale_cfg["name"],
            pattern=scale_cfg["pattern"],
            patterns_path=scale_cfg["patterns_path"],
            log_level=level,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
