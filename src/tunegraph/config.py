"""
Configuration loading for tunegraph.

Settings come from ``configs/config.yaml`` and can be overridden through
environment variables (a ``.env`` file is honoured via python-dotenv).
"""

from __future__ import annotations
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from loguru import logger

from tunegraph.exceptions import ConfigError

DEFAULT_CONFIG_PATH = "configs/config.yaml"

# env var -> (settings field, converter)
_ENV_OVERRIDES = {
    "TUNEGRAPH_RADIO_SIZE": ("radio_size", int),
    "TUNEGRAPH_DISCOVERY_SIZE": ("discovery_size", int),
    "TUNEGRAPH_LOG_LEVEL": ("log_level", str),
    "TUNEGRAPH_CATALOG_PATH": ("catalog_path", str),
}

# YAML may quote numbers ("0.6"), so these are coerced before validation
_NUMERIC_FIELDS = {
    "radio_size": int,
    "discovery_size": int,
    "genre_weight": float,
    "artist_weight": float,
}


@dataclass
class Settings:
    radio_size: int = 10
    discovery_size: int = 15
    discovery_name: str = "Weekly Discovery"
    genre_weight: float = 0.6
    artist_weight: float = 0.4
    log_level: str = "INFO"
    catalog_path: Optional[str] = None

    def validate(self) -> "Settings":
        if self.radio_size < 0 or self.discovery_size < 0:
            raise ConfigError("radio_size and discovery_size must be >= 0")
        for name in ("genre_weight", "artist_weight"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1], got {value}")
        if self.genre_weight + self.artist_weight > 1.0 + 1e-9:
            raise ConfigError("genre_weight + artist_weight must not exceed 1")
        return self


def _flatten(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Map the nested YAML sections onto flat ``Settings`` field names."""
    flat: Dict[str, Any] = {}
    recs = cfg.get("recommendations") or {}
    sim = cfg.get("similarity") or {}
    log = cfg.get("logging") or {}
    catalog = cfg.get("catalog") or {}

    if "radio_size" in recs:
        flat["radio_size"] = recs["radio_size"]
    if "discovery_size" in recs:
        flat["discovery_size"] = recs["discovery_size"]
    if "discovery_name" in recs:
        flat["discovery_name"] = recs["discovery_name"]
    if "genre_weight" in sim:
        flat["genre_weight"] = sim["genre_weight"]
    if "artist_weight" in sim:
        flat["artist_weight"] = sim["artist_weight"]
    if "level" in log:
        flat["log_level"] = log["level"]
    if "path" in catalog:
        flat["catalog_path"] = catalog["path"]
    return flat


def load_settings(config_path: str | Path | None = None, use_env: bool = True) -> Settings:
    """
    Load settings from YAML and environment overrides.

    Args:
        config_path: YAML file to read. When None, ``configs/config.yaml`` is
            used if it exists, otherwise defaults apply.
        use_env: Apply ``TUNEGRAPH_*`` environment overrides

    Returns:
        Validated settings

    Raises:
        ConfigError: If the file is unreadable or a value is invalid
    """
    if use_env:
        load_dotenv()

    values: Dict[str, Any] = {}
    path = Path(config_path) if config_path is not None else Path(DEFAULT_CONFIG_PATH)
    if path.exists():
        try:
            with open(path, "r") as f:
                cfg = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(cfg, dict):
            raise ConfigError(f"Expected a mapping at the top of {path}")
        values.update(_flatten(cfg))
    elif config_path is not None:
        raise ConfigError(f"Config file not found: {path}")

    if use_env:
        for env_key, (name, convert) in _ENV_OVERRIDES.items():
            raw = os.getenv(env_key)
            if raw is None or raw == "":
                continue
            try:
                values[name] = convert(raw)
            except ValueError as e:
                raise ConfigError(f"Invalid value for {env_key}: {raw!r}") from e

    for name, convert in _NUMERIC_FIELDS.items():
        if name in values:
            try:
                values[name] = convert(values[name])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid value for {name}: {values[name]!r}") from e

    known = {f.name for f in fields(Settings)}
    try:
        settings = Settings(**{k: v for k, v in values.items() if k in known})
    except TypeError as e:
        raise ConfigError(str(e)) from e
    return settings.validate()


def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
