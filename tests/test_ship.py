import pytest

from spacetrader.items import ResourceType
from spacetrader.ship import ShipType, build_ship


def test_scout_base_stats():
    ship = build_ship("Rustbucket", ShipType.SCOUT)
    assert ship.name == "Rustbucket"
    assert (ship.hull, ship.cargo_capacity, ship.speed, ship.jump_range) == (100, 20, 100, 10)
    assert (ship.weapon_power, ship.mining_power) == (5, 2)
    assert ship.fuel_capacity == 800
    assert ship.current_fuel == ship.fuel_capacity


@pytest.mark.parametrize("ship_type", list(ShipType))
def test_shields_are_half_hull_and_full(ship_type):
    ship = build_ship("x", ship_type)
    assert ship.max_shield == ship.max_hull // 2
    assert ship.shield == ship.max_shield
    assert ship.hull == ship.max_hull


def test_overrides_replace_defaults():
    ship = build_ship("Hauler", ShipType.FREIGHTER, cargo_capacity=250, speed=1)
    assert ship.cargo_capacity == 250
    assert ship.speed == 1
    assert ship.jump_range == 6
    assert ship.cargo_space_available() == 250


def test_miner_bays():
    ship = build_ship("Digger", ShipType.MINER)
    assert ship.capacity_for_resource(ResourceType.MINERAL) == 30
    assert ship.capacity_for_resource(ResourceType.LUNAR) == 0
    assert ship.total_specialized_cargo() == sum(
        ship.capacity_for_resource(r)
        for r in (ResourceType.MINERAL, ResourceType.GAS, ResourceType.ICE, ResourceType.EXOTIC)
    )
    assert (
        ship.specialized_cargo_info()
        == "Mining Bays: Mineral: 0/30 | Gas: 0/10 | Ice: 0/10 | Exotic: 0/5"
    )


def test_damage_absorbed_by_shield():
    ship = build_ship("x", ShipType.SCOUT)
    assert ship.take_damage(ship.shield) is False
    assert ship.shield == 0
    assert ship.hull == ship.max_hull


def test_damage_spills_into_hull():
    ship = build_ship("x", ShipType.SCOUT)
    shield = ship.shield
    assert ship.take_damage(shield + 10) is False
    assert ship.shield == 0
    assert ship.hull == ship.max_hull - 10


def test_damage_destroys_ship():
    ship = build_ship("x", ShipType.SCOUT)
    assert ship.take_damage(ship.shield + ship.hull) is True
    assert ship.hull == 0


def test_repair_and_recharge_clamp():
    ship = build_ship("x", ShipType.FIGHTER)
    ship.take_damage(ship.shield + 20)
    ship.repair(5)
    assert ship.hull == ship.max_hull - 15
    ship.repair(1000)
    assert ship.hull == ship.max_hull
    ship.recharge_shield(1000)
    assert ship.shield == ship.max_shield


def test_negative_amounts_rejected():
    ship = build_ship("x", ShipType.SCOUT)
    with pytest.raises(ValueError):
        ship.repair(-1)
    with pytest.raises(ValueError):
        ship.refuel(-5)


def test_fuel_consumption_and_refuel_round_trip():
    ship = build_ship("x", ShipType.FIGHTER)
    needed = ship.fuel_for_distance(10.0)
    assert needed == 10
    assert ship.consume_fuel_for_jump(10.0) is True
    assert ship.current_fuel == ship.fuel_capacity - needed
    assert ship.refuel(1000) == needed
    assert ship.current_fuel == ship.fuel_capacity


def test_fuel_rounds_up():
    ship = build_ship("x", ShipType.FIGHTER)
    assert ship.fuel_for_distance(2.1) == 3
    assert ship.fuel_for_distance(-4.0) == 0


def test_jump_fails_without_fuel():
    ship = build_ship("x", ShipType.SCOUT)
    ship.current_fuel = 1
    assert ship.has_fuel_for_jump(100.0) is False
    assert ship.consume_fuel_for_jump(100.0) is False
    assert ship.current_fuel == 1


def test_range_matches_fuel_use():
    ship = build_ship("x", ShipType.MINER)
    assert ship.has_fuel_for_jump(ship.max_range_with_current_fuel())
    assert ship.fuel_percentage() == pytest.approx(100.0)


def test_fuel_status_full_scout():
    ship = build_ship("x", ShipType.SCOUT)
    assert ship.fuel_status() == "Fuel: 800/800 (100.0%) | Range: 1000.0 LY"