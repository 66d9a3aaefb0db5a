"""Ships: hull, shields, cargo bays and fuel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from spacetrader.items import ResourceType


class ShipType(Enum):
    """Hull class of a ship."""

    SCOUT = "Scout"
    FREIGHTER = "Freighter"
    MINER = "Miner"
    FIGHTER = "Fighter"

    def __str__(self) -> str:
        return self.value


# hull, cargo, speed, jump range, weapon power, mining power
_BASE_STATS = {
    ShipType.SCOUT: (100, 20, 100, 10, 5, 2),
    ShipType.FREIGHTER: (200, 100, 60, 6, 2, 1),
    ShipType.MINER: (150, 50, 70, 7, 3, 10),
    ShipType.FIGHTER: (120, 15, 90, 8, 10, 1),
}

# mineral, gas, ice, exotic bay capacities
_BAYS = {
    ShipType.MINER: (30, 10, 10, 5),
    ShipType.FREIGHTER: (10, 10, 10, 5),
}
_DEFAULT_BAYS = (5, 5, 5, 2)

# fuel capacity, fuel per light year
_FUEL = {
    ShipType.SCOUT: (800, 0.8),
    ShipType.FREIGHTER: (1500, 1.5),
    ShipType.MINER: (1000, 1.2),
    ShipType.FIGHTER: (600, 1.0),
}


def _non_negative(amount: int) -> int:
    if amount < 0:
        raise ValueError("amount cannot be negative")
    return amount


@dataclass
class Ship:
    """A ship and its current condition."""

    name: str
    ship_type: ShipType
    hull: int
    max_hull: int
    shield: int
    max_shield: int
    cargo_capacity: int
    speed: int
    jump_range: int
    weapon_power: int
    mining_power: int
    mineral_bay_capacity: int
    gas_bay_capacity: int
    ice_bay_capacity: int
    exotic_bay_capacity: int
    fuel_capacity: int
    current_fuel: int
    fuel_consumption_rate: float

    def repair(self, amount: int) -> None:
        """Restore hull points, up to the maximum."""
        self.hull = min(self.hull + _non_negative(amount), self.max_hull)

    def recharge_shield(self, amount: int) -> None:
        """Restore shield points, up to the maximum."""
        self.shield = min(self.shield + _non_negative(amount), self.max_shield)

    def take_damage(self, amount: int) -> bool:
        """Apply damage to shields, then hull; return True if the ship is destroyed."""
        _non_negative(amount)
        if self.shield >= amount:
            self.shield -= amount
            return False
        remaining = amount - self.shield
        self.shield = 0
        if self.hull <= remaining:
            self.hull = 0
            return True
        self.hull -= remaining
        return False

    def cargo_space_available(self) -> int:
        """Free general cargo space."""
        return self.cargo_capacity

    def total_specialized_cargo(self) -> int:
        """Combined capacity of all specialised bays."""
        return (
            self.mineral_bay_capacity
            + self.gas_bay_capacity
            + self.ice_bay_capacity
            + self.exotic_bay_capacity
        )

    def capacity_for_resource(self, resource_type: ResourceType) -> int:
        """Capacity of the bay that holds this resource type, or 0 if none does."""
        bays = {
            ResourceType.MINERAL: self.mineral_bay_capacity,
            ResourceType.GAS: self.gas_bay_capacity,
            ResourceType.ICE: self.ice_bay_capacity,
            ResourceType.EXOTIC: self.exotic_bay_capacity,
        }
        return bays.get(resource_type, 0)

    def specialized_cargo_info(self) -> str:
        """One-line summary of the specialised bays."""
        return (
            f"Mining Bays: Mineral: 0/{self.mineral_bay_capacity} | "
            f"Gas: 0/{self.gas_bay_capacity} | "
            f"Ice: 0/{self.ice_bay_capacity} | "
            f"Exotic: 0/{self.exotic_bay_capacity}"
        )

    def fuel_for_distance(self, distance: float) -> int:
        """Fuel units needed to travel the given distance in light years."""
        return max(0, math.ceil(distance * self.fuel_consumption_rate))

    def has_fuel_for_jump(self, distance: float) -> bool:
        return self.current_fuel >= self.fuel_for_distance(distance)

    def consume_fuel_for_jump(self, distance: float) -> bool:
        """Burn the fuel for a jump; return False and burn nothing if short."""
        required = self.fuel_for_distance(distance)
        if self.current_fuel < required:
            return False
        self.current_fuel -= required
        return True

    def refuel(self, amount: int) -> int:
        """Add fuel up to capacity and return how much was actually added."""
        before = self.current_fuel
        self.current_fuel = min(self.current_fuel + _non_negative(amount), self.fuel_capacity)
        return self.current_fuel - before

    def fuel_percentage(self) -> float:
        return self.current_fuel / self.fuel_capacity * 100.0

    def max_range_with_current_fuel(self) -> float:
        return self.current_fuel / self.fuel_consumption_rate

    def fuel_status(self) -> str:
        return (
            f"Fuel: {self.current_fuel}/{self.fuel_capacity} "
            f"({self.fuel_percentage():.1f}%) | "
            f"Range: {self.max_range_with_current_fuel():.1f} LY"
        )


def build_ship(
    name: str,
    ship_type: ShipType,
    cargo_capacity: int | None = None,
    speed: int | None = None,
    jump_range: int | None = None,
    weapon_power: int | None = None,
    mining_power: int | None = None,
) -> Ship:
    """Build a fully fuelled ship with the stats of its type, optionally overridden."""
    hull, cargo, base_speed, base_jump, base_weapon, base_mining = _BASE_STATS[ship_type]
    mineral, gas, ice, exotic = _BAYS.get(ship_type, _DEFAULT_BAYS)
    fuel_capacity, fuel_rate = _FUEL[ship_type]

    def pick(override: int | None, default: int) -> int:
        return default if override is None else override

    return Ship(
        name=name,
        ship_type=ship_type,
        hull=hull,
        max_hull=hull,
        shield=hull // 2,
        max_shield=hull // 2,
        cargo_capacity=pick(cargo_capacity, cargo),
        speed=pick(speed, base_speed),
        jump_range=pick(jump_range, base_jump),
        weapon_power=pick(weapon_power, base_weapon),
        mining_power=pick(mining_power, base_mining),
        mineral_bay_capacity=mineral,
        gas_bay_capacity=gas,
        ice_bay_capacity=ice,
        exotic_bay_capacity=exotic,
        fuel_capacity=fuel_capacity,
        current_fuel=fuel_capacity,
        fuel_consumption_rate=fuel_rate,
    )