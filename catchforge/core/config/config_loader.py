"""Configuration loading for catchforge.

Settings are merged from, lowest to highest priority:
  1. Built-in defaults
  2. ``catchforge.yaml`` (explicit path, ``CATCHFORGE_CONFIG``, or the project root)
  3. Environment variables (``.env`` is honoured via python-dotenv)

Example ``catchforge.yaml``::

    annotations:
      package: org.jboss.solder.exception.control
    precedence:
      strict: false
    project:
      source_folders:
        - src/main/java
    logging:
      level: INFO
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from ..constants import CONFIG_FILE_NAME, DEFAULT_ANNOTATION_PACKAGE, DEFAULT_SOURCE_FOLDERS
from ..errors import ConfigurationError
from ..java_model.utils import is_qualified_name

load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass
class CatchForgeConfig:
    """Resolved catchforge settings."""

    annotation_package: str = DEFAULT_ANNOTATION_PACKAGE
    strict_precedence: bool = False
    source_folders: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_FOLDERS))
    log_level: str = "INFO"
    config_file: Optional[str] = None

    def validate(self) -> None:
        if not is_qualified_name(self.annotation_package):
            raise ConfigurationError(f"Invalid annotation package: {self.annotation_package!r}")
        if not self.source_folders:
            raise ConfigurationError("At least one source folder is required")
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level {self.log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
            )


def get_config_path(
    config_path: Optional[str] = None, project_root: Optional[str] = None
) -> Optional[Path]:
    """Locate the configuration file, if any.

    An explicitly requested file must exist; the project-root file is optional.
    """
    explicit = config_path or os.getenv("CATCHFORGE_CONFIG")
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        return path

    candidate = Path(project_root or os.getcwd()) / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


def load_yaml_config(path: Path) -> Dict[str, Any]:
    """Read a YAML configuration file into a flat settings dict."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid configuration file format: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error reading configuration file: {e}")

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")

    settings: Dict[str, Any] = {}
    annotations = raw.get("annotations") or {}
    if "package" in annotations:
        settings["annotation_package"] = str(annotations["package"])

    precedence = raw.get("precedence") or {}
    if "strict" in precedence:
        settings["strict_precedence"] = _as_bool(precedence["strict"])

    project = raw.get("project") or {}
    if "source_folders" in project:
        folders = project["source_folders"]
        if isinstance(folders, str):
            folders = [folders]
        settings["source_folders"] = [str(f) for f in folders]

    log_config = raw.get("logging") or {}
    if "level" in log_config:
        settings["log_level"] = str(log_config["level"]).upper()

    return settings


def load_env_config() -> Dict[str, Any]:
    """Read settings from ``CATCHFORGE_*`` environment variables."""
    settings: Dict[str, Any] = {}

    package = os.getenv("CATCHFORGE_ANNOTATION_PACKAGE")
    if package:
        settings["annotation_package"] = package

    strict = os.getenv("CATCHFORGE_STRICT_PRECEDENCE")
    if strict is not None:
        settings["strict_precedence"] = _as_bool(strict)

    folders = os.getenv("CATCHFORGE_SOURCE_FOLDERS")
    if folders:
        settings["source_folders"] = [f.strip() for f in folders.split(os.pathsep) if f.strip()]

    level = os.getenv("CATCHFORGE_LOG_LEVEL")
    if level:
        settings["log_level"] = level.upper()

    return settings


@lru_cache(maxsize=8)
def load_config(
    config_path: Optional[str] = None, project_root: Optional[str] = None
) -> CatchForgeConfig:
    """Load, merge and validate configuration.

    Results are cached per (config_path, project_root); call
    ``reload_configs()`` after changing files or the environment.
    """
    settings: Dict[str, Any] = {}

    path = get_config_path(config_path, project_root)
    if path is not None:
        settings.update(load_yaml_config(path))
        settings["config_file"] = str(path)
        logger.debug(f"Loaded configuration from {path}")

    settings.update(load_env_config())

    config = CatchForgeConfig(**settings)
    config.validate()
    return config


def reload_configs() -> None:
    """Clear cached configuration so the next load re-reads its sources."""
    load_config.cache_clear()
