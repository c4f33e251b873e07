"""
Query parsing: free text and key:value filter syntax.

Examples:
    web server                 -> terms ["web", "server"]
    type:vm location:eastus    -> filters only
    tag:env=production api     -> tag filter + term "api"
    web*                       -> wildcard term
"""
from azsearch.models.search import SearchFilters, SearchQuery

_BOOLEAN_OPERATORS = {"AND", "OR", "NOT"}
# Only these switch a query into advanced mode; OR on its own does not.
_ADVANCED_KEYWORDS = {"AND", "NOT"}

_TYPE_KEYS = {"type"}
_LOCATION_KEYS = {"location", "loc"}
_RESOURCE_GROUP_KEYS = {"rg", "resourcegroup", "resource-group"}


def _has_wildcard(term: str) -> bool:
    return "*" in term or "?" in term


def _is_advanced(query: str) -> bool:
    if ":" in query:
        return True
    return any(token in _ADVANCED_KEYWORDS for token in query.split())


def _apply_filter(sq: SearchQuery, key: str, value: str) -> None:
    """Apply one key:value token. Unknown keys and empty values are dropped."""
    if not value:
        return
    f = sq.filters
    if key in _TYPE_KEYS:
        f.resource_type = value
    elif key in _LOCATION_KEYS:
        f.location = value
    elif key in _RESOURCE_GROUP_KEYS:
        f.resource_group = value
    elif key == "tag":
        # An empty key ("tag:=prod") matches any tag key.
        tag_key, sep, tag_value = value.partition("=")
        f.tags[tag_key] = tag_value if sep else ""
    elif key == "name":
        sq.terms.append(value)


def _parse_advanced(query: str, sq: SearchQuery) -> SearchQuery:
    for token in query.split():
        if ":" in token:
            key, _, value = token.partition(":")
            _apply_filter(sq, key.lower(), value.lower())
        elif token.upper() in _BOOLEAN_OPERATORS:
            sq.operators.append(token.upper())
        else:
            sq.terms.append(token.lower())
    return sq


def parse_query(query: str) -> SearchQuery:
    """
    Turn a raw query string into a SearchQuery. Never raises: malformed
    tokens are dropped rather than rejected.
    """
    sq = SearchQuery(raw_query=query, filters=SearchFilters())

    if _is_advanced(query):
        sq.is_advanced = True
        _parse_advanced(query, sq)
    else:
        sq.terms = query.lower().split()

    sq.wildcards = any(_has_wildcard(t) for t in sq.terms)
    return sq

