"""
In-memory search over a catalog snapshot of Azure resources.
"""
import dataclasses
from typing import Iterable, List, Optional, Sequence, Tuple

from azsearch.models.resource import Resource
from azsearch.models.search import MatchType, SearchQuery, SearchResult
from azsearch.search.suggest import DEFAULT_LIMIT, get_suggestions
from azsearch.search.filters import matches_filters
from azsearch.search.query import parse_query
from azsearch.search.scoring import FILTER_MATCH_SCORE, calculate_score
from azsearch.search.text import search_in_text


def _result(
    r: Resource, match_type: MatchType, term: str, value: str, score: int
) -> SearchResult:
    return SearchResult(
        resource_id=r.id,
        resource_name=r.name,
        resource_type=r.type,
        location=r.location,
        resource_group=r.resource_group,
        tags=dict(r.tags),
        match_type=match_type,
        match_text=term,
        match_value=value,
        score=score,
    )


def _searchable_fields(r: Resource) -> Iterable[Tuple[MatchType, str, str]]:
    """(match type, text to match, value to report) in enumeration order."""
    yield MatchType.NAME, r.name, r.name
    yield MatchType.LOCATION, r.location, r.location
    yield MatchType.TYPE, r.type, r.type
    yield MatchType.RESOURCE_GROUP, r.resource_group, r.resource_group
    for key, value in r.tags.items():
        pair = f"{key}={value}"
        yield MatchType.TAG, key, pair
        yield MatchType.TAG, value, pair


class SearchEngine:
    """
    Holds one catalog snapshot and answers searches and suggestions over it.

    search() and get_suggestions() only read the snapshot. set_resources()
    swaps it without locking, so callers refreshing the catalog from another
    thread must serialise that against reads themselves.
    """

    def __init__(self, exclude_types: Optional[Sequence[str]] = None):
        self._resources: Tuple[Resource, ...] = ()
        self.exclude_types: List[str] = [t.lower() for t in exclude_types or []]

    @property
    def resources(self) -> Tuple[Resource, ...]:
        return self._resources

    def set_resources(self, resources: Iterable[Resource]) -> None:
        """Replace the whole catalog."""
        self._resources = tuple(resources)

    def search(self, query: str) -> List[SearchResult]:
        """
        Run query against every resource and return matches, best first.

        Equal scores keep catalog order, then field order within a resource.
        """
        if not query.strip():
            return []

        parsed = parse_query(query)
        if self.exclude_types:
            parsed.filters = dataclasses.replace(
                parsed.filters,
                exclude_types=parsed.filters.exclude_types + self.exclude_types,
            )

        results: List[SearchResult] = []
        for r in self._resources:
            results.extend(self._search_resource(r, parsed))

        results.sort(key=lambda res: res.score, reverse=True)
        return results

    def get_suggestions(self, partial: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        return get_suggestions(self._resources, partial, limit)

    def _search_resource(self, r: Resource, query: SearchQuery) -> List[SearchResult]:
        if not matches_filters(r, query.filters):
            return []

        # Filter-only query: every surviving resource is a hit.
        if query.is_advanced and not query.terms:
            return [_result(r, MatchType.FILTER, "filter match", "matches filters", FILTER_MATCH_SCORE)]

        results = []
        for match_type, text, value in _searchable_fields(r):
            for term in search_in_text(text, query.terms, query.wildcards):
                results.append(_result(r, match_type, term, value, calculate_score(match_type, term, text)))
        return results
