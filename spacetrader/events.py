"""Economic events that shift supply, demand, prices and taxes in a market."""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass
from enum import Enum

from spacetrader.items import ItemKind
from spacetrader.pricing import MarketItem


class EconomicEventKind(Enum):
    """What happened to the local economy."""

    SHORTAGE = "Shortage"
    SURPLUS = "Surplus"
    HIGH_DEMAND = "HighDemand"
    LOW_DEMAND = "LowDemand"
    TARIFF_INCREASE = "TariffIncrease"
    TARIFF_DECREASE = "TariffDecrease"
    MARKET_CRASH = "MarketCrash"
    MARKET_BOOM = "MarketBoom"
    LOCAL_CONFLICT = "LocalConflict"
    LOCAL_PEACE = "LocalPeace"


_ITEM_EVENTS = frozenset(
    {
        EconomicEventKind.SHORTAGE,
        EconomicEventKind.SURPLUS,
        EconomicEventKind.HIGH_DEMAND,
        EconomicEventKind.LOW_DEMAND,
    }
)

# Upper bounds of the roll for each kind; anything above the last is peace.
_EVENT_ROLLS = (
    (0.15, EconomicEventKind.SHORTAGE),
    (0.30, EconomicEventKind.SURPLUS),
    (0.45, EconomicEventKind.HIGH_DEMAND),
    (0.60, EconomicEventKind.LOW_DEMAND),
    (0.65, EconomicEventKind.TARIFF_INCREASE),
    (0.70, EconomicEventKind.TARIFF_DECREASE),
    (0.75, EconomicEventKind.MARKET_CRASH),
    (0.80, EconomicEventKind.MARKET_BOOM),
    (0.90, EconomicEventKind.LOCAL_CONFLICT),
)


@dataclass(frozen=True)
class EconomicEvent:
    """An event; shortages, surpluses and demand shifts name the item they hit."""

    kind: EconomicEventKind
    item_name: str | None = None

    def __post_init__(self) -> None:
        if self.kind in _ITEM_EVENTS and self.item_name is None:
            raise ValueError(f"{self.kind.value} event needs an item name")
        if self.kind not in _ITEM_EVENTS and self.item_name is not None:
            raise ValueError(f"{self.kind.value} event takes no item name")

    def apply(self, items: MutableMapping[str, MarketItem], tax_rate: float) -> float:
        """Apply the event to the market's stock and return the new tax rate."""
        kind = self.kind
        if kind in _ITEM_EVENTS:
            stock = items.get(self.item_name)
            if stock is not None:
                _apply_to_item(kind, stock)
            return tax_rate
        if kind is EconomicEventKind.TARIFF_INCREASE:
            return min(tax_rate * 1.2, 0.25)
        if kind is EconomicEventKind.TARIFF_DECREASE:
            return max(tax_rate * 0.8, 0.01)
        if kind in (EconomicEventKind.MARKET_CRASH, EconomicEventKind.MARKET_BOOM):
            factor = 0.7 if kind is EconomicEventKind.MARKET_CRASH else 1.3
            for stock in items.values():
                stock.set_price(int(stock.current_price * factor))
            return tax_rate
        conflict = kind is EconomicEventKind.LOCAL_CONFLICT
        for stock in items.values():
            item_kind = stock.item.item_type.kind
            if item_kind is ItemKind.EQUIPMENT:
                military_up = conflict
            elif item_kind is ItemKind.PRODUCT:
                military_up = not conflict
            else:
                continue
            if military_up:
                stock.demand_level = min(stock.demand_level * 1.2, 2.0)
            else:
                stock.demand_level = max(stock.demand_level * 0.8, 0.5)
        return tax_rate


def _apply_to_item(kind: EconomicEventKind, stock: MarketItem) -> None:
    if kind is EconomicEventKind.SHORTAGE:
        stock.supply_level = max(stock.supply_level * 0.7, 0.3)
    elif kind is EconomicEventKind.SURPLUS:
        stock.supply_level = min(stock.supply_level * 1.3, 2.0)
    elif kind is EconomicEventKind.HIGH_DEMAND:
        stock.demand_level = min(stock.demand_level * 1.3, 2.0)
    else:
        stock.demand_level = max(stock.demand_level * 0.7, 0.3)


def random_event(item_names: Iterable[str], rng: random.Random) -> EconomicEvent | None:
    """Draw a random event for a market stocking the given items.

    Returns None when the market stocks nothing.
    """
    names = list(item_names)
    if not names:
        return None
    name = names[rng.randrange(len(names))]
    roll = rng.random()
    kind = next(
        (kind for bound, kind in _EVENT_ROLLS if roll < bound),
        EconomicEventKind.LOCAL_PEACE,
    )
    return EconomicEvent(kind, name if kind in _ITEM_EVENTS else None)