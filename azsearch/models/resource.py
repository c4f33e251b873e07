from dataclasses import dataclass, field
from typing import Dict, List, Union

# Display-only values from the provider's property bag. Never searched.
PropertyValue = Union[str, int, float, bool, None, List["PropertyValue"], Dict[str, "PropertyValue"]]


@dataclass(frozen=True)
class Resource:
    id: str
    name: str
    type: str              # e.g. "Microsoft.Compute/virtualMachines"
    location: str = ""
    resource_group: str = ""
    status: str = ""
    tags: Dict[str, str] = field(default_factory=dict)
    properties: Dict[str, PropertyValue] = field(default_factory=dict)

    @property
    def simple_type(self) -> str:
        """Last '/' segment of the type, e.g. 'virtualMachines'."""
        return self.type.split("/")[-1]
