from azsearch.search.engine import SearchEngine
from azsearch.search.query import parse_query

__all__ = ["SearchEngine", "parse_query"]
