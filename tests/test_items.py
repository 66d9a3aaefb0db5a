import dataclasses

import pytest

from spacetrader.items import Item, ItemKind, ItemType, ResourceType


def test_resource_item_type_is_resource():
    item_type = ItemType(ItemKind.RESOURCE, ResourceType.GAS)
    assert item_type.is_resource() is True
    assert item_type.resource is ResourceType.GAS


@pytest.mark.parametrize(
    "kind",
    [k for k in ItemKind if k is not ItemKind.RESOURCE],
)
def test_non_resource_kinds_are_not_resources(kind):
    assert ItemType(kind).is_resource() is False


def test_resource_kind_requires_resource_type():
    with pytest.raises(ValueError):
        ItemType(ItemKind.RESOURCE)


def test_non_resource_kind_rejects_resource_type():
    with pytest.raises(ValueError):
        ItemType(ItemKind.FUEL, ResourceType.ICE)


def test_item_types_compare_by_value():
    assert ItemType(ItemKind.RESOURCE, ResourceType.ICE) == ItemType(
        ItemKind.RESOURCE, ResourceType.ICE
    )
    assert ItemType(ItemKind.RESOURCE, ResourceType.ICE) != ItemType(
        ItemKind.RESOURCE, ResourceType.GAS
    )


def test_item_is_hashable_and_usable_as_key():
    fuel = Item("Standard Fuel", 150, 1, ItemType(ItemKind.FUEL))
    same = Item("Standard Fuel", 150, 1, ItemType(ItemKind.FUEL))
    inventory = {fuel: 3}
    inventory[same] += 2
    assert inventory == {fuel: 5}


def test_item_is_immutable_but_replaceable():
    chip = Item("Computer Chip", 300, 2, ItemType(ItemKind.COMPONENT))
    with pytest.raises(dataclasses.FrozenInstanceError):
        chip.value = 10  # type: ignore[misc]
    cheaper = dataclasses.replace(chip, value=250)
    assert cheaper.value == 250
    assert cheaper.name == chip.name
    assert chip.value == 300


def test_item_rejects_negative_value():
    with pytest.raises(ValueError):
        Item("Iron", -1, 1, ItemType(ItemKind.RESOURCE, ResourceType.MINERAL))


def test_item_type_str():
    assert str(ItemType(ItemKind.RESOURCE, ResourceType.MINERAL)) == "Resource(Mineral)"
    assert str(ItemType(ItemKind.COMPONENT)) == "Component"