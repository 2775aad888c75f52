"""
Human-readable names for extensions.

The mapping is a flat JSON object keyed by extension without its dot,
e.g. {"ts": "TypeScript", "rs": "Rust"}. Loading happens once per run and
the result is handed to the aggregator; nothing here reads the working
directory implicitly.
"""

import json
import logging
from pathlib import Path
from typing import Mapping, Optional

from .errors import LabelsError

DEFAULT_LABELS_FILE = "labels.json"

logger = logging.getLogger(__name__)


def normalize_label_key(extension: str) -> str:
    if extension.startswith("."):
        extension = extension[1:]
    return extension.lower()


def resolve_label(labels: Mapping[str, str], extension: str) -> Optional[str]:
    if not extension:
        return None
    return labels.get(normalize_label_key(extension))


def load_labels(path: Path) -> dict[str, str]:
    """
    Read a label file. A missing file yields an empty mapping; anything that
    is not a JSON object of strings raises LabelsError.
    """
    if not path.exists():
        logger.debug("No label file at %s", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LabelsError(path, str(e)) from e
    except UnicodeDecodeError as e:
        raise LabelsError(path, f"not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise LabelsError(path, f"cannot read file ({e.strerror or e})") from e

    if not isinstance(data, dict):
        raise LabelsError(path, f"expected a JSON object, got {type(data).__name__}")

    labels: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise LabelsError(path, f"label for {key!r} must be a string")
        labels[normalize_label_key(key)] = value

    logger.debug("Loaded %d labels from %s", len(labels), path)
    return labels
