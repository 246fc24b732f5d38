"""Runtime settings for the ticker list pipeline.

Values are layered: dataclass defaults, then the ``pipeline`` section of
``config/settings.yaml``, then ``TICKERLIST_*`` environment variables, then
explicit overrides (CLI flags).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from loguru import logger

from tickerlist.core.errors import ConfigError
from tickerlist.symbols.normalize import normalise_exchange

DEFAULT_CONFIG_PATH = Path("config/settings.yaml")
NSE_MASTER_URL = "https://nsearchives.nseindia.com/content/equities/EQUITY_L.csv"
NSE_REFERER = "https://www.nseindia.com/"
DEFAULT_CHUNK_SIZE = 1000
DEFAULT_TIMEOUT = 15.0

_ENV_KEYS: Dict[str, str] = {
    "nse_url": "TICKERLIST_NSE_URL",
    "primary_file": "TICKERLIST_PRIMARY_FILE",
    "secondary_file": "TICKERLIST_SECONDARY_FILE",
    "output_dir": "TICKERLIST_OUTPUT_DIR",
    "chunk_size": "TICKERLIST_CHUNK_SIZE",
    "timeout": "TICKERLIST_TIMEOUT",
    "log_level": "TICKERLIST_LOG_LEVEL",
}


@dataclass(slots=True)
class PipelineSettings:
    nse_url: str = NSE_MASTER_URL
    referer: str = NSE_REFERER
    user_agent: Optional[str] = None
    primary_exchange: str = "NSE"
    secondary_exchange: str = "BSE"
    primary_file: Path = Path("nse.csv")
    secondary_file: Path = Path("bse.csv")
    output_dir: Path = Path("files")
    chunk_size: int = DEFAULT_CHUNK_SIZE
    timeout: float = DEFAULT_TIMEOUT
    log_level: Optional[str] = None
    logging: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.primary_file = Path(self.primary_file)
        self.secondary_file = Path(self.secondary_file)
        self.output_dir = Path(self.output_dir)
        self.chunk_size = _positive_int(self.chunk_size, "chunk_size")
        self.timeout = _positive_float(self.timeout, "timeout")
        self.primary_exchange = _exchange(self.primary_exchange, "primary_exchange")
        self.secondary_exchange = _exchange(self.secondary_exchange, "secondary_exchange")
        if not isinstance(self.logging, dict):
            raise ConfigError("'logging' section must be a mapping", key="logging")
        self.logging = dict(self.logging)
        if self.logging.get("level") is not None:
            self.logging["level"] = _log_level(self.logging["level"], "logging.level")
        if self.log_level is not None:
            self.log_level = _log_level(self.log_level, "log_level")

    def with_overrides(self, **overrides: Any) -> "PipelineSettings":
        """Copy with every non-``None`` override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(values) - {item.name for item in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        return replace(self, **values)


def _positive_int(value: Any, key: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be an integer, got {value!r}", key=key) from None
    if isinstance(value, float) and value != number:
        raise ConfigError(f"{key} must be an integer, got {value!r}", key=key)
    if number < 1:
        raise ConfigError(f"{key} must be at least 1, got {number}", key=key)
    return number


def _positive_float(value: Any, key: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be a number, got {value!r}", key=key) from None
    if number <= 0:
        raise ConfigError(f"{key} must be positive, got {number}", key=key)
    return number


def _exchange(value: Any, key: str) -> str:
    try:
        return normalise_exchange(value)
    except ValueError as exc:
        raise ConfigError(str(exc), key=key) from None


def _log_level(value: Any, key: str) -> str:
    """Upper-cased loguru level name; unknown levels are a ConfigError."""
    name = str(value).strip().upper()
    try:
        logger.level(name)
    except ValueError:
        raise ConfigError(f"Unknown log level {value!r}", key=key) from None
    return name


def load_yaml_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Read settings.yaml; only an explicitly requested file must exist."""
    explicit = path is not None or bool(os.getenv("TICKERLIST_CONFIG"))
    config_path = Path(path or os.getenv("TICKERLIST_CONFIG") or DEFAULT_CONFIG_PATH)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}", key="config") from None
        return {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed config file {config_path}: {exc}", key="config") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping", key="config")
    return data


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, var_name in _ENV_KEYS.items():
        raw = environ.get(var_name)
        if raw:
            values[key] = raw.strip()
    return values


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> PipelineSettings:
    """Build settings from defaults, YAML, environment and explicit overrides."""
    raw = load_yaml_config(config_path)
    pipeline_section = raw.get("pipeline") or {}
    if not isinstance(pipeline_section, dict):
        raise ConfigError("'pipeline' section must be a mapping", key="pipeline")

    settings = PipelineSettings(logging=raw.get("logging") or {})
    settings = settings.with_overrides(**pipeline_section)
    settings = settings.with_overrides(**_env_overrides(os.environ if environ is None else environ))
    return settings.with_overrides(**overrides)


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_TIMEOUT",
    "NSE_MASTER_URL",
    "NSE_REFERER",
    "PipelineSettings",
    "load_settings",
    "load_yaml_config",
]
