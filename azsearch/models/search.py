from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class MatchType(str, Enum):
    NAME           = "name"
    LOCATION       = "location"
    TYPE           = "type"
    RESOURCE_GROUP = "resource_group"
    TAG            = "tag"
    FILTER         = "filter"


@dataclass
class SearchFilters:
    location: str = ""
    resource_type: str = ""
    resource_group: str = ""
    tags: Dict[str, str] = field(default_factory=dict)   # key -> value ("" = any value)
    exclude_types: List[str] = field(default_factory=list)


@dataclass
class SearchQuery:
    raw_query: str
    terms: List[str] = field(default_factory=list)
    filters: SearchFilters = field(default_factory=SearchFilters)
    is_advanced: bool = False
    wildcards: bool = False
    # AND / OR / NOT are recognised and recorded here, but no boolean
    # algebra is applied: matching behaves as if they were absent.
    operators: List[str] = field(default_factory=list)


@dataclass
class SearchResult:
    resource_id: str
    resource_name: str
    resource_type: str
    location: str
    resource_group: str
    tags: Dict[str, str]
    match_type: MatchType
    match_text: str        # the query term that matched
    match_value: str       # the full text it matched in
    score: int

    def to_dict(self) -> dict:
        return {
            "resource_id": self.resource_id,
            "resource_name": self.resource_name,
            "resource_type": self.resource_type,
            "location": self.location,
            "resource_group": self.resource_group,
            "tags": dict(self.tags),
            "match_type": self.match_type.value,
            "match_text": self.match_text,
            "match_value": self.match_value,
            "score": self.score,
        }
