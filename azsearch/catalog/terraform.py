"""
Terraform reader: turns declared azurerm_* resources into catalog entries so
planned infrastructure is searchable alongside deployed resources.
"""
from typing import Any, Dict, List

import hcl2
from rich.console import Console

from azsearch.models.resource import Resource

console = Console(stderr=True)

DECLARED_STATUS = "declared"

# azurerm resource type → ARM type, so "type:vm" and friends work on .tf files.
ARM_TYPES: Dict[str, str] = {
    "azurerm_linux_virtual_machine": "Microsoft.Compute/virtualMachines",
    "azurerm_windows_virtual_machine": "Microsoft.Compute/virtualMachines",
    "azurerm_virtual_machine": "Microsoft.Compute/virtualMachines",
    "azurerm_managed_disk": "Microsoft.Compute/disks",
    "azurerm_storage_account": "Microsoft.Storage/storageAccounts",
    "azurerm_kubernetes_cluster": "Microsoft.ContainerService/managedClusters",
    "azurerm_virtual_network": "Microsoft.Network/virtualNetworks",
    "azurerm_network_security_group": "Microsoft.Network/networkSecurityGroups",
    "azurerm_network_interface": "Microsoft.Network/networkInterfaces",
    "azurerm_public_ip": "Microsoft.Network/publicIPAddresses",
    "azurerm_key_vault": "Microsoft.KeyVault/vaults",
    "azurerm_mssql_server": "Microsoft.Sql/servers",
    "azurerm_sql_server": "Microsoft.Sql/servers",
    "azurerm_container_registry": "Microsoft.ContainerRegistry/registries",
    "azurerm_container_group": "Microsoft.ContainerInstance/containerGroups",
    "azurerm_linux_web_app": "Microsoft.Web/sites",
    "azurerm_windows_web_app": "Microsoft.Web/sites",
    "azurerm_linux_function_app": "Microsoft.Web/sites",
    "azurerm_windows_function_app": "Microsoft.Web/sites",
    "azurerm_service_plan": "Microsoft.Web/serverFarms",
    "azurerm_resource_group": "Microsoft.Resources/resourceGroups",
}


def _unquote(val: Any) -> Any:
    """Some python-hcl2 releases keep the quotes around string literals and labels."""
    if isinstance(val, str) and len(val) >= 2 and val[0] == val[-1] == '"':
        return val[1:-1]
    return val


def _unwrap(val: Any) -> Any:
    """
    python-hcl2 wraps single-element blocks in a list.
    Recursively unwrap single-element lists that contain dicts.
    """
    if isinstance(val, list):
        if len(val) == 1 and isinstance(val[0], dict):
            return _unwrap(val[0])
        return [_unwrap(v) for v in val]
    if isinstance(val, dict):
        return {_unquote(k): _unwrap(v) for k, v in val.items() if not str(k).startswith("__")}
    return _unquote(val)


def _str_attr(props: Dict[str, Any], key: str) -> str:
    val = props.get(key)
    return val if isinstance(val, str) else ""


def _tags(props: Dict[str, Any]) -> Dict[str, str]:
    raw = props.get("tags")
    if not isinstance(raw, dict):
        return {}
    return {str(k): str(v) for k, v in raw.items()}


def _to_resource(tf_type: str, label: str, props: Dict[str, Any]) -> Resource:
    return Resource(
        id=f"{tf_type}.{label}",
        name=_str_attr(props, "name") or label,
        type=ARM_TYPES.get(tf_type, tf_type),
        location=_str_attr(props, "location"),
        resource_group=_str_attr(props, "resource_group_name"),
        status=DECLARED_STATUS,
        tags=_tags(props),
        properties=props,
    )


def _iter_instances(instances: Any):
    # hcl2 wraps the block in a list in most releases
    if isinstance(instances, dict):
        instances = [instances]
    if not isinstance(instances, list):
        return
    for instance_map in instances:
        if not isinstance(instance_map, dict):
            continue
        for label, raw_props in instance_map.items():
            props = _unwrap(raw_props) if isinstance(raw_props, dict) else {}
            yield _unquote(label), props if isinstance(props, dict) else {}


def parse_file(filepath: str) -> List[Resource]:
    resources: List[Resource] = []
    try:
        with open(filepath, encoding="utf-8") as fh:
            data = hcl2.load(fh)
    except Exception as exc:
        console.print(f"[yellow]Warning:[/yellow] failed to parse {filepath}: {exc}")
        return resources

    for resource_block in data.get("resource", []):
        for tf_type, instances in resource_block.items():
            tf_type = _unquote(tf_type)
            if not tf_type.startswith("azurerm_"):
                continue
            for label, props in _iter_instances(instances):
                resources.append(_to_resource(tf_type, label, props))

    return resources
