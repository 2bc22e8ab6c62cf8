"""
Configuration loading and validation for the JWT parser CLI.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "PROJECT_ROOT",
    "ConfigError",
    "ParserConfig",
    "load_config",
    "parse_parser_config",
]

logger = logging.getLogger(__name__)

# Project root directory (two levels up from the package directory)
PROJECT_ROOT = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)

DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "config.yaml")

SIGNATURE_FORMATS = ("base64url", "hex")


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


@dataclass
class ParserConfig:
    """Settings for parsing and printing tokens."""

    max_token_length: int = 8192  # 0 disables the cap
    indent: int = 4
    signature_format: str = "base64url"
    log_to_file: bool = False


def load_config(config_path: str | None = None) -> dict:
    """Load the YAML configuration file.

    When *config_path* is ``None`` the default ``config/config.yaml`` is
    used if it exists; otherwise an empty config is returned.

    Raises:
        ConfigError: If an explicitly requested file is missing, cannot be
            parsed, or is not a mapping.
    """
    if config_path is None:
        if not os.path.isfile(DEFAULT_CONFIG_PATH):
            logger.debug("No config at %s, using defaults", DEFAULT_CONFIG_PATH)
            return {}
        config_path = DEFAULT_CONFIG_PATH

    path = Path(config_path)
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {config_path}\n"
            "Copy config/config.yaml.example to config/config.yaml and adjust it."
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse config file {config_path}: {exc}") from exc

    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    logger.debug("Config loaded from %s", config_path)
    return cfg


def _section(cfg: dict, name: str) -> dict:
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping")
    return section


def _non_negative_int(value, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{label} must be a non-negative integer, got {value!r}")
    return value


def parse_parser_config(cfg: dict) -> ParserConfig:
    """Extract and validate parser settings from the config dict."""
    parser_cfg = _section(cfg, "parser")
    output_cfg = _section(cfg, "output")
    logging_cfg = _section(cfg, "logging")

    signature_format = output_cfg.get("signature_format", "base64url")
    if signature_format not in SIGNATURE_FORMATS:
        raise ConfigError(
            f"output.signature_format must be one of {', '.join(SIGNATURE_FORMATS)}, "
            f"got {signature_format!r}"
        )

    log_to_file = logging_cfg.get("log_to_file", False)
    if not isinstance(log_to_file, bool):
        raise ConfigError("logging.log_to_file must be true or false")

    return ParserConfig(
        max_token_length=_non_negative_int(
            parser_cfg.get("max_token_length", 8192), "parser.max_token_length",
        ),
        indent=_non_negative_int(output_cfg.get("indent", 4), "output.indent"),
        signature_format=signature_format,
        log_to_file=log_to_file,
    )
