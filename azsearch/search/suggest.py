from typing import Iterable, List

from azsearch.models.resource import Resource

MIN_PARTIAL_LENGTH = 2
DEFAULT_LIMIT = 10


def _candidates(resource: Resource) -> Iterable[str]:
    yield resource.name
    yield resource.location
    if "/" in resource.type:
        yield resource.simple_type.lower()
    yield from resource.tags


def get_suggestions(
    resources: Iterable[Resource], partial: str, limit: int = DEFAULT_LIMIT
) -> List[str]:
    """
    Autocomplete candidates: names, locations, short type names and tag keys
    that start with partial (case-insensitive). Sorted, deduplicated, capped.
    """
    prefix = partial.lower()
    if len(prefix) < MIN_PARTIAL_LENGTH:
        return []

    found = set()
    for r in resources:
        for candidate in _candidates(r):
            if candidate and candidate.lower().startswith(prefix):
                found.add(candidate)

    return sorted(found)[:limit]
