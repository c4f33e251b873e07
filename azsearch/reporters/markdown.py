"""
Markdown search result report.
"""
from datetime import datetime, timezone
from typing import List

from jinja2 import Environment

from azsearch.models.search import SearchResult
from azsearch.reporters.json_reporter import count_by_match_type

_TEMPLATE = """\
# Search Results

**Query:** `{{ query }}`
**Generated:** {{ generated }}
**Resources searched:** {{ resource_count }}
**Matches:** {{ results | length }}

{% if counts %}
| Match type | Count |
|------------|-------|
{% for match_type, n in counts.items() if n %}
| {{ match_type }} | {{ n }} |
{% endfor %}
{% endif %}

{% if results %}
## Matches

| Score | Resource | Type | Location | Resource group | Match | Matched text |
|-------|----------|------|----------|----------------|-------|--------------|
{% for r in results %}
| {{ r.score }} | {{ r.resource_name | md }} | {{ r.resource_type | md }} | {{ r.location | md }} | {{ r.resource_group | md }} | {{ r.match_type.value }} | {{ r.match_value | md }} |
{% endfor %}
{% else %}
_No resources matched._
{% endif %}
"""


def _md_escape(text: str) -> str:
    return str(text).replace("|", "\\|")


def build_report(query: str, results: List[SearchResult], resource_count: int) -> str:
    env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
    env.filters["md"] = _md_escape
    template = env.from_string(_TEMPLATE)

    return template.render(
        generated=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        query=query,
        resource_count=resource_count,
        counts=count_by_match_type(results),
        results=results,
    )
