"""
PRISM — Config Store
JSON-backed settings in ~/.prism-picker/config.json (or $PRISM_HOME).
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .models import PrismConfig

logger = logging.getLogger(__name__)


def default_home() -> Path:
    override = os.environ.get("PRISM_HOME")
    return Path(override).expanduser() if override else Path.home() / ".prism-picker"


class ConfigStore:
    """Loads and saves PrismConfig, caching the loaded copy."""

    def __init__(self, home: Optional[Path] = None) -> None:
        self.home = home or default_home()
        self._config: Optional[PrismConfig] = None

    @property
    def config_file(self) -> Path:
        return self.home / "config.json"

    @property
    def logs_dir(self) -> Path:
        return self.home / "logs"

    def load(self) -> PrismConfig:
        if self._config is not None:
            return self._config
        if not self.config_file.exists():
            self._config = PrismConfig()
            return self._config
        try:
            raw = json.loads(self.config_file.read_text(encoding="utf-8"))
            self._config = PrismConfig(**raw)
        except (OSError, ValueError, TypeError, ValidationError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", self.config_file, exc)
            self._config = PrismConfig()
        return self._config

    def save(self, config: PrismConfig) -> None:
        self._config = config
        self.home.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(config.model_dump_json(indent=2), encoding="utf-8")

    def save_theme(self, theme: str) -> None:
        cfg = self.load()
        cfg.theme = theme
        cfg.last_modified = datetime.now().isoformat()
        self.save(cfg)
