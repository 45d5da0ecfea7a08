"""
Configuration for SmartHome
===========================
Runtime settings loaded from environment variables, the catalogue
configuration (recognised sensor and actuator type names) and the logging
setup.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable, Mapping
from contextlib import suppress
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path

from dotenv import dotenv_values

from smarthome.constants import ACTUATOR_KEY, DEFAULT_CATALOGUE_PATH, SENSOR_KEY
from smarthome.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("SMARTHOME_ENV", "development"))
    DEBUG: bool = field(default_factory=lambda: _env_bool("SMARTHOME_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("SMARTHOME_LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("SMARTHOME_LOG_FILE", ""))

    # Catalogue
    catalogue_path: str = field(
        default_factory=lambda: os.getenv("SMARTHOME_CATALOGUE_PATH", str(DEFAULT_CATALOGUE_PATH))
    )
    sensor_key: str = field(default_factory=lambda: os.getenv("SMARTHOME_SENSOR_KEY", SENSOR_KEY))
    actuator_key: str = field(default_factory=lambda: os.getenv("SMARTHOME_ACTUATOR_KEY", ACTUATOR_KEY))

    def __post_init__(self) -> None:
        if not self.catalogue_path or not self.catalogue_path.strip():
            raise ConfigurationError("SMARTHOME_CATALOGUE_PATH cannot be blank")


def _split_list(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Split a comma separated value, dropping blanks."""
    if raw is None:
        return ()
    if isinstance(raw, str):
        parts: Iterable[str] = raw.split(",")
    else:
        parts = raw
    return tuple(part.strip() for part in parts if part is not None and str(part).strip())


@dataclass(frozen=True)
class CatalogueConfig:
    """
    Key to list-of-names mapping declaring which capability types are recognised.

    The ``sensor`` and ``actuator`` keys hold the type names each catalogue
    will agree to construct. Values keep their declaration order.
    """

    entries: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    source: str = "<memory>"

    def get_list(self, key: str) -> list[str]:
        """Names declared under ``key``; empty when the key is absent."""
        return list(self.entries.get(key, ()))

    def keys(self) -> list[str]:
        return list(self.entries.keys())

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str | Iterable[str]], source: str = "<memory>") -> "CatalogueConfig":
        """Build from an in-memory mapping of strings or sequences of strings."""
        if mapping is None:
            raise ConfigurationError("Invalid arguments")
        entries = {str(key).strip(): _split_list(value) for key, value in mapping.items()}
        return cls(entries=entries, source=source)

    @classmethod
    def from_file(cls, path: str | os.PathLike | None) -> "CatalogueConfig":
        """
        Load a properties-style file (``key=value`` lines, comma separated lists).

        Raises:
            ConfigurationError: path is blank, or the file cannot be read
        """
        if path is None or not str(path).strip():
            raise ConfigurationError("Invalid arguments")

        file_name = str(path)
        try:
            with open(file_name, encoding="utf-8") as stream:
                values = dotenv_values(stream=stream, interpolate=False)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(
                f"Error occurred while reading the configuration file '{file_name}': {exc}",
                detail={"path": file_name},
            ) from exc

        config = cls.from_mapping({key: value for key, value in values.items() if key}, source=file_name)
        logger.debug("Loaded catalogue configuration from %s (keys: %s)", file_name, config.keys())
        return config


def load_catalogue_config(config: AppConfig | None = None) -> CatalogueConfig:
    """Load the catalogue configuration referenced by ``config``."""
    config = config or AppConfig()
    return CatalogueConfig.from_file(Path(config.catalogue_path))


CONSOLE_HANDLER = "smarthome_console"
FILE_HANDLER = "smarthome_file"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(log_level: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level or "INFO").upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level '{log_level}'")
    return level


def setup_logging(debug: bool = False, log_file: str | None = None, log_level: str | int | None = None) -> None:
    """
    Install the SmartHome console handler (and optional rotating file handler)
    on the root logger.

    Args:
        debug: Force DEBUG regardless of ``log_level``
        log_file: Path of a rotating log file; console only when empty
        log_level: Level name or number, e.g. ``AppConfig.log_level``

    Calling it again only adjusts levels; handlers are never duplicated.
    """
    level = _resolve_level(log_level, debug)
    root = logging.getLogger()
    root.setLevel(level)

    installed = {getattr(h, "name", "") for h in root.handlers}
    formatter = logging.Formatter(LOG_FORMAT)
    new_handlers: list[logging.Handler] = []

    if CONSOLE_HANDLER not in installed:
        stream = sys.stdout
        with suppress(AttributeError, ValueError):
            stream.reconfigure(encoding="utf-8", errors="replace")
        console = logging.StreamHandler(stream=stream)
        console.name = CONSOLE_HANDLER
        new_handlers.append(console)

    if log_file and FILE_HANDLER not in installed:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        rotating.name = FILE_HANDLER
        new_handlers.append(rotating)

    for handler in new_handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for handler in root.handlers:
        if getattr(handler, "name", "") in (CONSOLE_HANDLER, FILE_HANDLER):
            handler.setLevel(level)

    if new_handlers:
        logger.info("Logging initialized at level: %s", logging.getLevelName(level))


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    config = AppConfig()
    _resolve_level(config.log_level, debug=False)
    return config
