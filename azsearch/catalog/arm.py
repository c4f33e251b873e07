"""
Reader for ARM resource listings, i.e. the output of
`az resource list -o json` (or the same data saved as YAML).
"""
import json
import os
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console

from azsearch.models.resource import Resource

console = Console(stderr=True)


def _resource_group_from_id(resource_id: str) -> str:
    parts = resource_id.split("/")
    for i, part in enumerate(parts[:-1]):
        if part.lower() == "resourcegroups":
            return parts[i + 1]
    return ""


def _status(item: Dict[str, Any]) -> str:
    state = item.get("provisioningState")
    if not state and isinstance(item.get("properties"), dict):
        state = item["properties"].get("provisioningState")
    return str(state) if state else ""


def _tags(raw: Any) -> Dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(k): "" if v is None else str(v) for k, v in raw.items()}


def to_resource(item: Dict[str, Any]) -> Optional[Resource]:
    """Map one listing entry to a Resource; None if it has no name or type."""
    name = item.get("name")
    rtype = item.get("type")
    if not name or not rtype:
        return None
    rid = str(item.get("id") or "")
    props = item.get("properties")
    return Resource(
        id=rid,
        name=str(name),
        type=str(rtype),
        location=str(item.get("location") or ""),
        resource_group=str(item.get("resourceGroup") or _resource_group_from_id(rid)),
        status=_status(item),
        tags=_tags(item.get("tags")),
        properties=props if isinstance(props, dict) else {},
    )


def parse_data(data: Any) -> List[Resource]:
    if isinstance(data, dict) and isinstance(data.get("value"), list):
        data = data["value"]
    if not isinstance(data, list):
        return []
    resources = []
    for item in data:
        if not isinstance(item, dict):
            continue
        r = to_resource(item)
        if r is not None:
            resources.append(r)
    return resources


def parse_file(filepath: str) -> List[Resource]:
    _, ext = os.path.splitext(filepath.lower())
    try:
        with open(filepath, encoding="utf-8") as fh:
            if ext == ".json":
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        console.print(f"[yellow]Warning:[/yellow] failed to parse {filepath}: {exc}")
        return []

    return parse_data(data)
