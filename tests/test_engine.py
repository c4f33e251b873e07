"""
SearchEngine and suggestion tests.
"""
import pytest

from azsearch.models.resource import Resource
from azsearch.models.search import MatchType
from azsearch.search import SearchEngine


def _named(*names):
    return [Resource(id=str(i), name=n, type="Microsoft.Web/sites") for i, n in enumerate(names)]


# --------------------------------------------------------- Search
class TestSearch:
    @pytest.mark.parametrize("query", ["", " ", "   ", "\t\n "])
    def test_blank_query_returns_nothing(self, engine, query):
        assert engine.search(query) == []

    def test_empty_catalog(self):
        assert SearchEngine().search("web") == []

    def test_name_match(self, engine):
        results = engine.search("web")
        hit = next(r for r in results if r.resource_name == "web-server-vm" and r.match_type == MatchType.NAME)
        assert hit.score > 0
        assert hit.match_text == "web"
        assert hit.match_value == "web-server-vm"

    def test_location_search(self, engine):
        results = engine.search("eastus")
        names = {r.resource_name for r in results if r.match_type == MatchType.LOCATION}
        assert names == {"web-server-vm", "production-aks"}

    def test_type_and_location_filters(self, engine):
        results = engine.search("type:vm location:eastus")
        assert len(results) == 1
        assert results[0].resource_name == "web-server-vm"
        assert results[0].match_type == MatchType.FILTER
        assert results[0].score == 100

    def test_tag_filter_excludes_other_values(self, engine):
        results = engine.search("tag:env=production")
        names = {r.resource_name for r in results}
        assert names == {"web-server-vm", "production-aks"}
        assert "webstorage" not in names

    def test_tag_filter_with_empty_key_matches_values(self, engine):
        results = engine.search("tag:=staging")
        assert {r.resource_name for r in results} == {"webstorage"}

    def test_filters_with_terms(self, engine):
        results = engine.search("rg:production web")
        assert {r.resource_name for r in results} == {"web-server-vm"}
        assert all(r.match_type != MatchType.FILTER for r in results)

    def test_tag_key_and_value_matches(self, engine):
        results = engine.search("production")
        tag_hits = [r for r in results if r.match_type == MatchType.TAG]
        assert {r.resource_name for r in tag_hits} == {"web-server-vm", "production-aks"}
        assert all(r.match_value == "env=production" for r in tag_hits)

    def test_one_result_per_field_and_term(self, engine):
        results = engine.search("web server")
        vm_name_hits = [
            r for r in results
            if r.resource_name == "web-server-vm" and r.match_type == MatchType.NAME
        ]
        assert sorted(r.match_text for r in vm_name_hits) == ["server", "web"]

    def test_wildcard_search(self, engine):
        names = {r.resource_name for r in engine.search("web*")}
        assert {"web-server-vm", "webstorage"} <= names

    def test_wildcard_star_matches_every_resource(self, engine):
        names = {r.resource_name for r in engine.search("*")}
        assert names == {"web-server-vm", "webstorage", "production-aks"}

    def test_boolean_keywords_do_not_filter(self, engine):
        plain = engine.search("web")
        negated = engine.search("NOT web")
        assert [r.to_dict() for r in negated] == [r.to_dict() for r in plain]

    def test_unknown_filter_key_is_ignored(self, engine):
        assert len(engine.search("colour:blue")) == 3

    def test_properties_never_searched(self):
        e = SearchEngine()
        e.set_resources([
            Resource(id="1", name="box", type="Microsoft.Compute/virtualMachines",
                     properties={"secret": "needle", "nested": {"k": "needle"}}),
        ])
        assert e.search("needle") == []


# --------------------------------------------------------- Ranking
class TestRanking:
    def test_exact_match_first(self):
        e = SearchEngine()
        e.set_resources([
            Resource(id="2", name="exact-match-longer-name", type="Microsoft.Storage/storageAccounts"),
            Resource(id="3", name="different-exact-match-name", type="Microsoft.Network/virtualNetworks"),
            Resource(id="1", name="exact-match", type="Microsoft.Compute/virtualMachines"),
        ])
        results = e.search("exact-match")
        assert results[0].resource_name == "exact-match"
        assert results[0].score == 2399
        assert [r.score for r in results] == [2399, 1398, 898]

    def test_scores_descending(self, engine):
        scores = [r.score for r in engine.search("e")]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_catalog_order(self):
        e = SearchEngine()
        e.set_resources(_named("alpha-one", "alpha-two", "alpha-six"))
        assert [r.resource_name for r in e.search("alpha")] == ["alpha-one", "alpha-two", "alpha-six"]
        e.set_resources(_named("alpha-six", "alpha-two", "alpha-one"))
        assert [r.resource_name for r in e.search("alpha")] == ["alpha-six", "alpha-two", "alpha-one"]

    def test_ties_keep_field_order(self):
        e = SearchEngine()
        e.set_resources([
            Resource(id="1", name="kv", type="Microsoft.KeyVault/vaults",
                     tags={"team": "blue", "owner": "blue"}),
        ])
        tag_hits = [r for r in e.search("blue") if r.match_type == MatchType.TAG]
        assert [r.match_value for r in tag_hits] == ["team=blue", "owner=blue"]

    def test_repeat_search_identical(self, engine):
        first = [r.to_dict() for r in engine.search("e")]
        second = [r.to_dict() for r in engine.search("e")]
        assert first == second


# --------------------------------------------------------- Catalog handling
class TestCatalog:
    def test_set_resources_replaces(self, engine):
        engine.set_resources(_named("only-one"))
        assert [r.name for r in engine.resources] == ["only-one"]
        assert engine.search("production") == []

    def test_later_list_mutation_not_seen(self):
        resources = _named("first")
        e = SearchEngine()
        e.set_resources(resources)
        resources.append(Resource(id="x", name="second", type="Microsoft.Web/sites"))
        assert len(e.resources) == 1

    def test_result_tags_are_copies(self, engine, sample_resources):
        result = engine.search("web-server-vm")[0]
        result.tags["env"] = "changed"
        assert sample_resources[0].tags["env"] == "production"

    def test_engine_exclude_types(self, sample_resources):
        e = SearchEngine(exclude_types=["Microsoft.Storage"])
        e.set_resources(sample_resources)
        assert "webstorage" not in {r.resource_name for r in e.search("web")}


# --------------------------------------------------------- Suggestions
class TestSuggestions:
    def setup_method(self):
        self.engine = SearchEngine()
        self.engine.set_resources([
            Resource(id="1", name="web-server", location="eastus",
                     type="Microsoft.Compute/virtualMachines", tags={"environment": "production"}),
            Resource(id="2", name="web-storage", location="westus",
                     type="Microsoft.Storage/storageAccounts", tags={"application": "web"}),
        ])

    def test_short_input(self):
        assert self.engine.get_suggestions("w") == []
        assert self.engine.get_suggestions("") == []

    def test_names_and_locations(self):
        assert self.engine.get_suggestions("we") == ["web-server", "web-storage", "westus"]

    def test_location(self):
        assert self.engine.get_suggestions("EAST") == ["eastus"]

    def test_short_type_lowercased(self):
        assert self.engine.get_suggestions("vi") == ["virtualmachines"]

    def test_tag_keys_not_values(self):
        assert self.engine.get_suggestions("en") == ["environment"]
        assert self.engine.get_suggestions("pr") == []

    def test_deduplicated(self):
        self.engine.set_resources(_named("dup-name", "dup-name"))
        assert self.engine.get_suggestions("du") == ["dup-name"]

    def test_capped_at_ten_sorted(self):
        self.engine.set_resources(_named(*[f"node-{i:02d}" for i in range(11, -1, -1)]))
        suggestions = self.engine.get_suggestions("no")
        assert suggestions == [f"node-{i:02d}" for i in range(10)]

    def test_custom_limit(self):
        self.engine.set_resources(_named(*[f"node-{i:02d}" for i in range(12)]))
        assert len(self.engine.get_suggestions("no", limit=3)) == 3
