import pytest

from azsearch.models.resource import Resource


@pytest.fixture
def sample_resources():
    return [
        Resource(
            id="/subscriptions/123/resourceGroups/rg1/providers/Microsoft.Compute/virtualMachines/vm1",
            name="web-server-vm",
            type="Microsoft.Compute/virtualMachines",
            location="eastus",
            resource_group="production-rg",
            tags={"env": "production", "app": "web"},
        ),
        Resource(
            id="/subscriptions/123/resourceGroups/rg2/providers/Microsoft.Storage/storageAccounts/storage1",
            name="webstorage",
            type="Microsoft.Storage/storageAccounts",
            location="westus",
            resource_group="staging-rg",
            tags={"env": "staging", "app": "web"},
        ),
        Resource(
            id="/subscriptions/123/resourceGroups/rg1/providers/Microsoft.ContainerService/managedClusters/aks1",
            name="production-aks",
            type="Microsoft.ContainerService/managedClusters",
            location="eastus",
            resource_group="production-rg",
            tags={"env": "production", "app": "api"},
        ),
    ]


@pytest.fixture
def engine(sample_resources):
    from azsearch.search import SearchEngine
    e = SearchEngine()
    e.set_resources(sample_resources)
    return e
