"""
Optional JSON config file with defaults for CLI options.

Looked up in the working directory unless a path is given. Values are
coerced leniently; a config that cannot be read is reported and ignored.
"""

import json
import logging
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_FILES = [".extension-count.json"]

logger = logging.getLogger(__name__)


def find_config(base: Path, override_path: Optional[str], disabled: bool) -> Optional[Path]:
    if disabled:
        return None
    if override_path:
        path = Path(override_path)
        if not path.is_absolute():
            path = base / path
        if not path.exists():
            logger.warning("Config file not found: %s", path)
            return None
        return path
    for name in DEFAULT_CONFIG_FILES:
        candidate = base / name
        if candidate.exists():
            return candidate
    return None


def load_config(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return {}
    return data


def normalize_patterns(value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value if item]
    return []


def coerce_int(value, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def coerce_bool(value, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "y", "on"}:
        return True
    if text in {"0", "false", "no", "n", "off"}:
        return False
    return default


def coerce_choice(value, choices: list[str], default: str) -> str:
    if value is None:
        return default
    text = str(value).strip().lower()
    return text if text in choices else default
