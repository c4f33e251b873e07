"""
Catalog snapshot loading. The search engine never fetches anything itself;
it is handed the resources read here.
"""
import os
from typing import Iterable, List

from rich.console import Console

from azsearch.catalog import arm, terraform
from azsearch.detect import detect_format
from azsearch.models.resource import Resource

console = Console(stderr=True)


def collect_files(paths: Iterable[str]) -> List[str]:
    """Expand directories into file paths."""
    files = []
    for p in paths:
        if os.path.isfile(p):
            files.append(p)
        elif os.path.isdir(p):
            for root, _, fnames in os.walk(p):
                for fname in sorted(fnames):
                    files.append(os.path.join(root, fname))
        else:
            console.print(f"[yellow]Warning:[/yellow] '{p}' does not exist, skipping.")
    return files


def load_files(file_paths: Iterable[str]) -> List[Resource]:
    resources: List[Resource] = []
    for fp in file_paths:
        fmt = detect_format(fp)
        if fmt == "terraform":
            resources.extend(terraform.parse_file(fp))
        elif fmt == "arm":
            resources.extend(arm.parse_file(fp))
        else:
            console.print(f"[dim]Skipping unsupported file:[/dim] {fp}")
    return resources


def load_catalog(paths: Iterable[str]) -> List[Resource]:
    return load_files(collect_files(paths))
