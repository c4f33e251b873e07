from typing import Dict, List

from azsearch.models.resource import Resource
from azsearch.models.search import SearchFilters
from azsearch.search.text import matches_text

# Short names users type in "type:" filters → substrings of the ARM type.
TYPE_ALIASES: Dict[str, List[str]] = {
    "vm":       ["Microsoft.Compute/virtualMachines", "virtualmachine", "virtualmachines"],
    "storage":  ["Microsoft.Storage/storageAccounts", "storageaccount", "storageaccounts"],
    "aks":      ["Microsoft.ContainerService/managedClusters", "managedcluster", "managedclusters"],
    "network":  ["Microsoft.Network/virtualNetworks", "virtualnetwork", "virtualnetworks"],
    "keyvault": ["Microsoft.KeyVault/vaults", "vault", "vaults"],
    "sql":      ["Microsoft.Sql/servers", "server", "servers"],
    "acr":      ["Microsoft.ContainerRegistry/registries", "registry", "registries"],
    "aci":      ["Microsoft.ContainerInstance/containerGroups", "containergroup", "containergroups"],
    "webapp":   ["Microsoft.Web/sites", "site", "sites"],
    "function": ["Microsoft.Web/sites", "functionapp", "functions"],
}


def matches_resource_type(resource_type: str, search_term: str) -> bool:
    """
    True if search_term names resource_type: as a substring, as a known
    alias, or as a substring of the last '/' segment.
    """
    rt = resource_type.lower()
    term = search_term.lower()

    if term in rt:
        return True

    for alias in TYPE_ALIASES.get(term, []):
        if alias.lower() in rt:
            return True

    parts = rt.split("/")
    if len(parts) > 1 and term in parts[-1]:
        return True

    return False


def _matches_tags(tags: Dict[str, str], required: Dict[str, str]) -> bool:
    for want_key, want_value in required.items():
        found = any(
            matches_text(k, want_key) and (not want_value or matches_text(v, want_value))
            for k, v in tags.items()
        )
        if not found:
            return False
    return True


def matches_filters(resource: Resource, filters: SearchFilters) -> bool:
    """A resource must pass every active filter to be searched."""
    if filters.resource_type and not matches_resource_type(resource.type, filters.resource_type):
        return False

    if filters.location and not matches_text(resource.location, filters.location):
        return False

    if filters.resource_group and not matches_text(resource.resource_group, filters.resource_group):
        return False

    if filters.tags and not _matches_tags(resource.tags, filters.tags):
        return False

    for excluded in filters.exclude_types:
        if matches_text(resource.type, excluded):
            return False

    return True
