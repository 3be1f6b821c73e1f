"""Schema and helpers for persisted planevec settings."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import config
from .math import helpers

logger = logging.getLogger(__name__)


@dataclass
class VectorSettings:
    seed: int | None = config.DEFAULT_SEED
    log_level: str = config.DEFAULT_LOG_LEVEL

    def to_json(self) -> dict[str, Any]:
        return {
            "seed": self.seed,
            "log_level": self.log_level,
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "VectorSettings":
        seed = payload.get("seed", config.DEFAULT_SEED)
        return cls(
            seed=None if seed is None else int(seed),
            log_level=str(payload.get("log_level", config.DEFAULT_LOG_LEVEL)).upper(),
        )


def load_last_used(path: Path | None = None) -> VectorSettings:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    try:
        data = json.loads(settings_path.read_text())
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", settings_path)
        return VectorSettings()
    except json.JSONDecodeError:
        logger.warning("Settings file %s is not valid JSON, using defaults", settings_path)
        return VectorSettings()
    return VectorSettings.from_json(data if isinstance(data, dict) else {})


def save_last_used(settings: VectorSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True))
    logger.info("Saved settings to %s", settings_path)
    return settings_path


def apply_settings(settings: VectorSettings) -> None:
    """Seed the shared RNG and set the package logger level."""
    logging.getLogger("planevec").setLevel(settings.log_level)
    helpers.seed(settings.seed)
