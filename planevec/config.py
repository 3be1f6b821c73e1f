"""Default configuration values for planevec."""

from __future__ import annotations

from pathlib import Path

DEFAULT_EPSILON = 1e-6
PARALLEL_TOLERANCE = 1e-6
DEFAULT_PRECISION = 8
DEFAULT_MIX_FACTOR = 0.5
DEFAULT_SEED = None
DEFAULT_LOG_LEVEL = "WARNING"

DEFAULT_SETTINGS_PATH = Path.home() / ".planevec_settings.json"
