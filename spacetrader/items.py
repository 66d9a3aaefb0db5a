"""Tradeable items and their classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResourceType(Enum):
    """Kind of raw or refined resource."""

    MINERAL = "Mineral"
    GAS = "Gas"
    ICE = "Ice"
    LUNAR = "Lunar"
    STELLAR = "Stellar"
    EXOTIC = "Exotic"
    REFINED = "Refined"


class ItemKind(Enum):
    """Broad category an item belongs to."""

    RESOURCE = "Resource"
    COMPONENT = "Component"
    PRODUCT = "Product"
    BLUEPRINT = "Blueprint"
    EQUIPMENT = "Equipment"
    SHIP_MODULE = "ShipModule"
    FUEL = "Fuel"


@dataclass(frozen=True)
class ItemType:
    """An item category; resources also carry their resource type."""

    kind: ItemKind
    resource: ResourceType | None = None

    def __post_init__(self) -> None:
        if self.kind is ItemKind.RESOURCE and self.resource is None:
            raise ValueError("a resource item type needs a resource type")
        if self.kind is not ItemKind.RESOURCE and self.resource is not None:
            raise ValueError(f"{self.kind.value} item type takes no resource type")

    def is_resource(self) -> bool:
        """Return True for raw or refined resources."""
        return self.kind is ItemKind.RESOURCE

    def __str__(self) -> str:
        if self.resource is not None:
            return f"{self.kind.value}({self.resource.value})"
        return self.kind.value


@dataclass(frozen=True)
class Item:
    """A named good with a value per unit and a weight per unit."""

    name: str
    value: int
    weight: int
    item_type: ItemType

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("item value cannot be negative")
        if self.weight < 0:
            raise ValueError("item weight cannot be negative")