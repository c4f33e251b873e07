"""
Application configuration, read from YAML.

The config is an ordinary object built once by the caller and passed down;
nothing here caches it at module level.
"""
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console

console = Console(stderr=True)

DEFAULT_CONFIG_PATH = os.path.join("~", ".config", "azure-tui", "config.yaml")


@dataclass
class SearchConfig:
    exclude_types: List[str] = field(default_factory=list)
    suggestion_limit: int = 10
    result_limit: int = 0      # 0 = unlimited


@dataclass
class CatalogConfig:
    paths: List[str] = field(default_factory=list)


@dataclass
class AppConfig:
    env: str = ""
    search: SearchConfig = field(default_factory=SearchConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)


def _str_list(val: Any) -> List[str]:
    if isinstance(val, str):
        return [val]
    if isinstance(val, list):
        return [str(v) for v in val if v is not None]
    return []


def _int(val: Any, default: int) -> int:
    try:
        return max(int(val), 0)
    except (TypeError, ValueError):
        return default


def from_dict(data: Dict[str, Any]) -> AppConfig:
    search = data.get("search") or {}
    catalog = data.get("catalog") or {}
    if not isinstance(search, dict):
        search = {}
    if not isinstance(catalog, dict):
        catalog = {}
    defaults = SearchConfig()
    return AppConfig(
        env=str(data.get("env") or ""),
        search=SearchConfig(
            exclude_types=_str_list(search.get("exclude_types")),
            suggestion_limit=_int(search.get("suggestion_limit", defaults.suggestion_limit), defaults.suggestion_limit),
            result_limit=_int(search.get("result_limit", defaults.result_limit), defaults.result_limit),
        ),
        catalog=CatalogConfig(paths=[os.path.expanduser(p) for p in _str_list(catalog.get("paths"))]),
    )


def load_config(path: Optional[str] = None) -> AppConfig:
    """
    Load config from path (default ~/.config/azure-tui/config.yaml).
    A missing file gives defaults; an unreadable one warns and gives defaults.
    """
    path = os.path.expanduser(path or DEFAULT_CONFIG_PATH)
    if not os.path.exists(path):
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        console.print(f"[yellow]Warning:[/yellow] failed to read config {path}: {exc}")
        return AppConfig()

    if not isinstance(data, dict):
        console.print(f"[yellow]Warning:[/yellow] config {path} is not a mapping, using defaults.")
        return AppConfig()

    return from_dict(data)
