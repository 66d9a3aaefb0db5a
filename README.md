# spacetrader

Models for a space trading simulation: tradeable items, ships with cargo
bays and fuel, pilot skills that train over time, a star system's commodity
market driven by supply, demand and random economic events, standing buy and
sell orders, contracts between players with hourly price trends, and a seeded
2-D noise source.

The package is a library and has no command-line program.

## Installation

```
pip install .
```

To install the test requirements as well, run `pip install ".[test]"`, then
run `pytest`.

## Overview

| Module | What it holds |
| --- | --- |
| `spacetrader.items` | `Item`, `ItemType`, `ItemKind`, `ResourceType` |
| `spacetrader.ship` | `Ship`, `ShipType`, `build_ship` |
| `spacetrader.skills` | `Skill`, `SkillSet`, `SkillCategory` |
| `spacetrader.pricing` | `MarketType`, `MarketItem`, `PriceHistory` |
| `spacetrader.orders` | `TradeOrder`, `OrderType`, `OrderStatus` |
| `spacetrader.events` | `EconomicEvent`, `EconomicEventKind`, `random_event` |
| `spacetrader.market` | `Market`, `market_for`, `MarketError` |
| `spacetrader.ledger` | `MarketContract`, `ContractProgress`, `ContractStatus`, `PriceTrend`, `ItemMarketStatistics`, `record_trend` |
| `spacetrader.noise` | `Perlin`, seeded 2-D gradient noise |

## Items

```python
from spacetrader.items import Item, ItemKind, ItemType, ResourceType

iron = Item("Iron", value=100, weight=1,
            item_type=ItemType(ItemKind.RESOURCE, ResourceType.MINERAL))
chip = Item("Computer Chip", value=300, weight=2,
            item_type=ItemType(ItemKind.COMPONENT))
```

Items are frozen and hashable, so they can be used as inventory keys.
A resource item type must carry a `ResourceType`; any other kind must not.

## Ships

```python
from spacetrader.ship import ShipType, build_ship

ship = build_ship("Rustbucket", ShipType.SCOUT)
ship.fuel_for_distance(12.5)      # fuel units needed for the jump
if ship.consume_fuel_for_jump(12.5):
    print(ship.fuel_status())
destroyed = ship.take_damage(80)  # shields absorb damage before the hull
```

`build_ship` accepts optional overrides for cargo capacity, speed, jump
range, weapon power and mining power. Ships start fully fuelled.

## Skills

```python
from spacetrader.skills import SkillCategory, SkillSet

skills = SkillSet()
skills.activate(SkillCategory.MINING)
skills.gain_mining_experience(150)
skills.mining_level()        # 1
skills.mining_progress()     # fraction of the way to the next level
skills.update_all()          # active skills gain points for time passed
```

## Trading

```python
from spacetrader.market import MarketError, market_for
from spacetrader.pricing import MarketType

market = market_for("sol", MarketType.MINING)
market.add_item(iron, quantity=100, base_price=100, volatility=0.1)

item, quantity, total_cost = market.buy_item("Iron", 5)  # cost includes tax
revenue = market.sell_item(item, 2)
market.update_market(game_time=1)
market.price_trend("Iron")   # (percent change, label such as "Rising")
```

A purchase that cannot be filled raises `MarketError`. Selling an item the
market does not stock lists it in the market.

`Market` takes an optional `rng` (a `random.Random`) and `clock` (a callable
returning epoch seconds), which makes its random swings, events and
timestamps reproducible.

Economic events can be applied directly with `market.apply_event(...)` or
queued with `market.generate_random_event()`; queued events take effect on
the next `update_market` call and last one cycle.

### Standing orders

```python
order_id = market.create_buy_order("player-1", "Iron", 10, target_price=90)
market.create_sell_order("player-1", "Iron", 5, target_price=150)
market.player_orders("player-1")
executed, credits = market.process_orders(inventory, credits=5000)
market.cancel_order(order_id, "player-1")
```

`process_orders` updates the inventory mapping in place and returns the
orders that executed together with the player's remaining credits. A buy
order on an item the market does not stock raises `MarketError`.

## Contracts and price trends

`spacetrader.ledger` holds the records of contracts between players and
their progress notes. `record_trend(trends, item_name, price, quantity, now)`
adds a sale to an hourly trend list, folding sales within the same hour into
a volume-weighted average and keeping the most recent 24 hours.

## Noise

```python
from spacetrader.noise import Perlin

noise = Perlin(seed=12345)
noise.get(0.5, 1.25)   # smooth value in [-1.0, 1.0], zero at integer points
```

## What the package does not do

There is no map of star systems, no generated universe and no travel between
systems; a market is created for a system id given by the caller. There is
no player-to-player marketplace of listings and bids; `spacetrader.ledger`
provides the contract and trend records but nothing that manages them.
Nothing is saved to disk, and there is no game loop, screen or network
service.