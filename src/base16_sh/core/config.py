"""
Server configuration.

Values come from an optional ``base16.toml`` and are then overridden by
environment variables::

    [server]
    host = "127.0.0.1"
    port = 3000

    [data]
    dir = "data"                 # schemes/ and templates/ live below
    schemes_dir = "data/schemes" # optional, overrides dir/schemes
    templates_dir = "data/templates"
    fuzzy_threshold = 0.8

    [logging]
    dir = ".base16/logs"
    level = "INFO"

Environment: BASE16_DATA_DIR, BASE16_HOST, BASE16_PORT,
BASE16_FUZZY_THRESHOLD, BASE16_LOG_DIR, BASE16_LOG_LEVEL.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .resolver import DEFAULT_FUZZY_THRESHOLD

CONFIG_FILE = "base16.toml"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_DATA_DIR = Path("data")
DEFAULT_LOG_DIR = Path(".base16/logs")


@dataclass(frozen=True)
class ServerConfig:
    """Resolved configuration for catalogs, server and logging."""

    data_dir: Path = DEFAULT_DATA_DIR
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD
    log_dir: Path = DEFAULT_LOG_DIR
    log_level: str = "INFO"
    schemes_override: Path | None = field(default=None, repr=False)
    templates_override: Path | None = field(default=None, repr=False)

    @property
    def schemes_dir(self) -> Path:
        return self.schemes_override or self.data_dir / "schemes"

    @property
    def templates_dir(self) -> Path:
        return self.templates_override or self.data_dir / "templates"

    def validate(self) -> ServerConfig:
        """Check value ranges.

        Raises:
            ConfigError: On an out-of-range threshold or port.
        """
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise ConfigError(f"fuzzy_threshold must be within [0, 1], got {self.fuzzy_threshold}")
        if not 0 < self.port < 65536:
            raise ConfigError(f"port must be within 1-65535, got {self.port}")
        return self


def _optional_path(value: Any) -> Path | None:
    return Path(value) if value else None


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(section).__name__}")
    return section


def parse_config(data: dict[str, Any]) -> ServerConfig:
    """Build a ServerConfig from parsed TOML data.

    Raises:
        ConfigError: If a section is not a table or a value has the wrong type.
    """
    server = _section(data, "server")
    data_section = _section(data, "data")
    logging_section = _section(data, "logging")

    try:
        return ServerConfig(
            data_dir=Path(data_section.get("dir", DEFAULT_DATA_DIR)),
            host=str(server.get("host", DEFAULT_HOST)),
            port=int(server.get("port", DEFAULT_PORT)),
            fuzzy_threshold=float(data_section.get("fuzzy_threshold", DEFAULT_FUZZY_THRESHOLD)),
            log_dir=Path(logging_section.get("dir", DEFAULT_LOG_DIR)),
            log_level=str(logging_section.get("level", "INFO")).upper(),
            schemes_override=_optional_path(data_section.get("schemes_dir")),
            templates_override=_optional_path(data_section.get("templates_dir")),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration value: {e}") from e


def apply_env(config: ServerConfig, environ: dict[str, str] | None = None) -> ServerConfig:
    """Override configuration values from ``BASE16_*`` environment variables."""
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    try:
        if "BASE16_DATA_DIR" in env:
            overrides["data_dir"] = Path(env["BASE16_DATA_DIR"])
        if "BASE16_HOST" in env:
            overrides["host"] = env["BASE16_HOST"]
        if "BASE16_PORT" in env:
            overrides["port"] = int(env["BASE16_PORT"])
        if "BASE16_FUZZY_THRESHOLD" in env:
            overrides["fuzzy_threshold"] = float(env["BASE16_FUZZY_THRESHOLD"])
        if "BASE16_LOG_DIR" in env:
            overrides["log_dir"] = Path(env["BASE16_LOG_DIR"])
        if "BASE16_LOG_LEVEL" in env:
            overrides["log_level"] = env["BASE16_LOG_LEVEL"].upper()
    except ValueError as e:
        raise ConfigError(f"Invalid environment value: {e}") from e
    return replace(config, **overrides)


def load_config(
    path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> ServerConfig:
    """Load configuration from ``path`` (default ``./base16.toml``) and the environment.

    A missing file is not an error; defaults apply.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    config_path = path or Path(CONFIG_FILE)
    config = ServerConfig()
    if config_path.is_file():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", config_path) from e
        config = parse_config(data)
    elif path is not None:
        raise ConfigError("Configuration file not found", config_path)

    return apply_env(config, environ).validate()
