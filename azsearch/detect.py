import json
import os
from typing import Any

import yaml


def _looks_like_arm(data: Any) -> bool:
    """ARM listings are a list of objects with a 'Provider/kind' type."""
    if isinstance(data, dict) and isinstance(data.get("value"), list):
        data = data["value"]
    if not isinstance(data, list) or not data:
        return False
    first = data[0]
    return isinstance(first, dict) and "/" in str(first.get("type", "")) and "name" in first


def detect_format(filepath: str) -> str:
    """
    Return 'terraform', 'arm', or 'unknown'.
    """
    _, ext = os.path.splitext(filepath.lower())

    if ext == ".tf":
        return "terraform"

    if ext == ".json":
        try:
            with open(filepath, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError):
            return "unknown"
        return "arm" if _looks_like_arm(data) else "unknown"

    if ext in (".yaml", ".yml"):
        try:
            with open(filepath, encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except (OSError, yaml.YAMLError):
            return "unknown"
        return "arm" if _looks_like_arm(data) else "unknown"

    return "unknown"
