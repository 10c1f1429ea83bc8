import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from netveil.exceptions import ConfigMissingError

logger = logging.getLogger(__name__)

# --- Enums ---


class ObfuscatorKind(str, Enum):
    IPV4 = "ipv4"
    IPV4_PATTERN = "ipv4_pattern"
    IPV6 = "ipv6"
    MAC = "mac"


class ReplacementType(str, Enum):
    STATIC = "static"
    CONSISTENT = "consistent"


class TrackerKind(str, Enum):
    SIMPLE = "simple"
    STRIPED = "striped"


# --- Configuration Models ---


class ObfuscatorConfig(BaseModel):
    """One obfuscator in the scrubbing chain."""

    type: ObfuscatorKind
    replacement_type: ReplacementType = ReplacementType.CONSISTENT
    tracker: TrackerKind = TrackerKind.SIMPLE


def _default_obfuscators() -> List[ObfuscatorConfig]:
    # MAC runs first so dashed MACs are not half consumed by the IPv4 scanner
    return [
        ObfuscatorConfig(type=ObfuscatorKind.MAC),
        ObfuscatorConfig(type=ObfuscatorKind.IPV4),
        ObfuscatorConfig(type=ObfuscatorKind.IPV6),
    ]


class NetVeilConfig(BaseModel):
    """Root configuration for netveil."""

    obfuscators: List[ObfuscatorConfig] = Field(default_factory=_default_obfuscators)


# --- Loading Logic ---

LOCAL_DEFAULTS = ["netveil.yaml", "netveil.json", "netveil.toml"]


def default_config_path() -> Path:
    return Path.home() / ".netveil" / "config.toml"


def load_config(
    config_path: Optional[str] = None, verbose: bool = False
) -> NetVeilConfig:
    """
    Load configuration from a file and environment variables.

    Args:
        config_path: Path to the config file (YAML, JSON, TOML). When omitted,
            ``netveil.{yaml,json,toml}`` in the working directory and then
            ``~/.netveil/config.toml`` are tried.
        verbose: Log where the configuration came from at INFO level.

    Returns:
        NetVeilConfig object.

    Raises:
        ConfigMissingError: If the specified config file is not found.
        ValidationError: If the config is invalid.
    """
    config_dict = {}
    log = logger.info if verbose else logger.debug

    # 1. Resolve Path
    if not config_path:
        for local in LOCAL_DEFAULTS:
            if Path(local).exists():
                config_path = local
                break

        if not config_path and default_config_path().exists():
            config_path = str(default_config_path())

    # 2. Load File
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigMissingError(f"Configuration file not found: {config_path}")

        text = path.read_text(encoding="utf-8")
        log("Loaded config from %s", path.absolute())

        if path.suffix == ".json":
            config_dict = json.loads(text)
        elif path.suffix == ".toml":
            config_dict = tomllib.loads(text)
        else:  # YAML is default
            config_dict = yaml.safe_load(text) or {}

    # 3. Environment Variable Overrides, applied to every obfuscator
    overrides = {}
    env_replacement = os.getenv("NETVEIL_REPLACEMENT_TYPE")
    if env_replacement:
        overrides["replacement_type"] = env_replacement
    env_tracker = os.getenv("NETVEIL_TRACKER")
    if env_tracker:
        overrides["tracker"] = env_tracker

    # 4. Validate and Return
    try:
        config = NetVeilConfig(**config_dict)
        if overrides:
            config = NetVeilConfig(
                obfuscators=[
                    {**entry.model_dump(), **overrides} for entry in config.obfuscators
                ]
            )
        return config
    except ValidationError as e:
        log("Configuration validation error: %s", e)
        raise
