"""Read ``_config.yml`` into a SiteConfig."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from postpress.core.config import SiteConfig
from postpress.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "_config.yml"


class ConfigLoader:
    """Loads and validates the configuration of one site.

    File values are passed to SiteConfig as init arguments. SiteConfig ranks
    POSTPRESS_* environment variables above them, so the environment wins.
    """

    def __init__(self, site_root: Path | None = None):
        self.site_root = site_root if site_root is not None else Path.cwd()

    @property
    def config_path(self) -> Path:
        return self.site_root / CONFIG_FILENAME

    def load(self) -> SiteConfig:
        data = self._read_file()

        paths = data.get("paths") or {}
        if not isinstance(paths, dict):
            msg = f"Configuration 'paths' must be a mapping, got {type(paths).__name__}"
            raise ConfigError(msg)
        data["paths"] = {**paths, "site_root": self.site_root}

        try:
            return SiteConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}") from e

    def _read_file(self) -> dict[str, Any]:
        if not self.config_path.exists():
            logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, self.site_root)
            return {}

        try:
            data = yaml.safe_load(self.config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            msg = f"{CONFIG_FILENAME} must be a mapping, got {type(data).__name__}"
            raise ConfigError(msg)
        return data


def load_config(site_root: Path | None = None) -> SiteConfig:
    return ConfigLoader(site_root).load()
