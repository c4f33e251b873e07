"""
JSON search result report.
"""
import json
from datetime import datetime, timezone
from typing import Dict, List

from azsearch import __version__
from azsearch.models.search import MatchType, SearchResult


def count_by_match_type(results: List[SearchResult]) -> Dict[str, int]:
    counts = {m.value: 0 for m in MatchType}
    for r in results:
        counts[r.match_type.value] += 1
    return counts


def build_report(query: str, results: List[SearchResult], resource_count: int) -> str:
    report = {
        "meta": {
            "generated": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "query": query,
            "resources_searched": resource_count,
            "tool": "azsearch",
            "version": __version__,
        },
        "summary": count_by_match_type(results),
        "results": [r.to_dict() for r in results],
    }
    return json.dumps(report, indent=2)
