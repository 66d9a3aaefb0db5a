"""Market types, market stock and the price model that drives them."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field, replace
from enum import Enum

from spacetrader.items import Item

HISTORY_LIMIT = 10
MAX_PRICE_CHANGE = 0.2


def _now(now: int | None) -> int:
    return int(time.time()) if now is None else now


class MarketType(Enum):
    """Specialisation of a market, which sets its tax and price behaviour."""

    TRADING = "Trading"
    INDUSTRIAL = "Industrial"
    MINING = "Mining"
    AGRICULTURAL = "Agricultural"
    HIGH_TECH = "HighTech"
    BLACK = "Black"
    MILITARY = "Military"

    def tax_rate(self) -> float:
        """Default tax rate charged on purchases in this kind of market."""
        return _TAX_RATES[self]


_TAX_RATES = {
    MarketType.TRADING: 0.05,
    MarketType.INDUSTRIAL: 0.08,
    MarketType.MINING: 0.07,
    MarketType.AGRICULTURAL: 0.04,
    MarketType.HIGH_TECH: 0.09,
    MarketType.BLACK: 0.00,
    MarketType.MILITARY: 0.03,
}


@dataclass(frozen=True)
class PriceHistory:
    """A recorded price at a moment in time (seconds since the epoch)."""

    timestamp: int
    price: int


@dataclass
class MarketItem:
    """An item stocked by a market, with its supply, demand and price record.

    Supply and demand levels are 1.0 when normal; less supply or more demand
    pushes the price up.
    """

    item: Item
    quantity: int
    base_price: int
    current_price: int
    price_volatility: float = 0.1
    supply_level: float = 1.0
    demand_level: float = 1.0
    price_history: list[PriceHistory] = field(default_factory=list)
    production_rate: int = 0
    consumption_rate: int = 0

    def record_price(self, price: int, now: int | None = None) -> None:
        """Append a price point, keeping only the most recent ones."""
        self.price_history.append(PriceHistory(_now(now), price))
        del self.price_history[:-HISTORY_LIMIT]

    def reprice(self, now: int | None = None) -> int:
        """Recompute the price from supply and demand and return it.

        The price moves at most a fifth of the current price per call; the
        item's value follows the new price and the change is recorded.
        """
        supply_factor = 2.0 - self.supply_level
        target = max(0, int(self.base_price * supply_factor * self.demand_level))
        current = float(self.current_price)
        floor = int(current * (1.0 - MAX_PRICE_CHANGE))
        ceiling = int(current * (1.0 + MAX_PRICE_CHANGE))
        self.set_price(min(max(target, floor), ceiling))
        self.record_price(self.current_price, now)
        return self.current_price

    def set_price(self, price: int) -> None:
        """Set the current price and keep the item's value in step with it."""
        self.current_price = price
        self.item = replace(self.item, value=price)

    def price_trend(self) -> tuple[float, str]:
        """Percent change between the last two price points, with a label."""
        if len(self.price_history) < 2:
            return 0.0, "Stable"
        previous = self.price_history[-2].price
        latest = self.price_history[-1].price
        if previous == 0:
            change = math.inf if latest > 0 else 0.0
        else:
            change = (latest - previous) / previous * 100.0
        return change, _trend_label(change)


def _trend_label(change: float) -> str:
    if change > 10.0:
        return "Skyrocketing"
    if change > 5.0:
        return "Rising"
    if change > 1.0:
        return "Increasing"
    if change < -10.0:
        return "Plummeting"
    if change < -5.0:
        return "Falling"
    if change < -1.0:
        return "Decreasing"
    return "Stable"