"""A star system's commodity market with taxes, events and standing orders."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterator, MutableMapping
from dataclasses import dataclass, field, replace
from uuid import UUID

from spacetrader.events import EconomicEvent, random_event
from spacetrader.items import Item, ItemKind
from spacetrader.orders import OrderStatus, OrderType, TradeOrder
from spacetrader.pricing import MarketItem, MarketType, PriceHistory

RANDOM_EVENT_CHANCE = 0.05

_VOLATILITY_FACTORS = {
    MarketType.BLACK: 2.0,
    MarketType.TRADING: 0.8,
}

_SUPPLY_DEMAND = {
    (MarketType.INDUSTRIAL, ItemKind.COMPONENT): (1.5, 0.8),
    (MarketType.INDUSTRIAL, ItemKind.RESOURCE): (0.7, 1.3),
    (MarketType.MINING, ItemKind.RESOURCE): (1.8, 0.6),
    (MarketType.MINING, ItemKind.COMPONENT): (0.6, 1.4),
    (MarketType.HIGH_TECH, ItemKind.SHIP_MODULE): (1.2, 0.9),
    (MarketType.HIGH_TECH, ItemKind.EQUIPMENT): (1.3, 0.8),
    (MarketType.MILITARY, ItemKind.EQUIPMENT): (1.2, 0.9),
}

_PRICE_FACTORS = {
    (MarketType.INDUSTRIAL, ItemKind.COMPONENT): 0.9,
    (MarketType.INDUSTRIAL, ItemKind.RESOURCE): 1.1,
    (MarketType.MINING, ItemKind.RESOURCE): 0.85,
    (MarketType.MINING, ItemKind.COMPONENT): 1.15,
}
_BLACK_MARKET_MARKUP = 1.2

_SELL_MARGINS = {
    MarketType.BLACK: 0.15,
    MarketType.TRADING: 0.05,
}
_DEFAULT_SELL_MARGIN = 0.10
_UNLISTED_MARKDOWN = 0.85


class MarketError(Exception):
    """Raised when a market cannot carry out a trade or order."""


def _epoch_seconds() -> int:
    return int(time.time())


@dataclass
class Market:
    """The commodity market of one star system."""

    system_id: str
    items: dict[str, MarketItem] = field(default_factory=dict)
    last_update: int = 0
    local_events: list[EconomicEvent] = field(default_factory=list)
    market_type: MarketType = MarketType.TRADING
    tax_rate: float = MarketType.TRADING.tax_rate()
    trade_orders: list[TradeOrder] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    clock: Callable[[], int] = field(default=_epoch_seconds, repr=False, compare=False)

    def add_item(self, item: Item, quantity: int, base_price: int, volatility: float) -> None:
        """Stock an item, adjusting its price and dynamics to the market type."""
        kind = item.item_type.kind
        key = (self.market_type, kind)
        supply, demand = _SUPPLY_DEMAND.get(key, (1.0, 1.0))

        production = int(quantity * 0.05 * supply) if supply > 1.0 else int(quantity * 0.01)
        consumption = int(quantity * 0.05 * demand) if demand > 1.0 else int(quantity * 0.01)

        if self.market_type is MarketType.BLACK:
            price = int(base_price * _BLACK_MARKET_MARKUP)
        elif key in _PRICE_FACTORS:
            price = int(base_price * _PRICE_FACTORS[key])
        else:
            price = base_price

        self.items[item.name] = MarketItem(
            item=item,
            quantity=quantity,
            base_price=base_price,
            current_price=price,
            price_volatility=volatility * _VOLATILITY_FACTORS.get(self.market_type, 1.0),
            supply_level=supply,
            demand_level=demand,
            price_history=[PriceHistory(self.clock(), price)],
            production_rate=production,
            consumption_rate=consumption,
        )

    def _purchase_cost(self, price: int, quantity: int) -> int:
        base_cost = price * quantity
        return base_cost + int(base_cost * self.tax_rate)

    def buy_item(self, item_name: str, quantity: int) -> tuple[Item, int, int]:
        """Buy from the market; return the item, the quantity and the taxed cost.

        The returned item carries the price paid per unit as its value.
        """
        stock = self.items.get(item_name)
        if stock is None:
            raise MarketError(f"{item_name!r} is not traded in market {self.system_id!r}")
        if stock.quantity < quantity:
            raise MarketError(
                f"only {stock.quantity} units of {item_name!r} available, {quantity} requested"
            )
        price = stock.current_price
        total_cost = self._purchase_cost(price, quantity)
        stock.quantity -= quantity
        stock.supply_level = max(stock.supply_level * 0.98, 0.5)
        stock.reprice(self.clock())
        return replace(stock.item, value=price), quantity, total_cost

    def sell_item(self, item: Item, quantity: int) -> int:
        """Sell to the market and return the revenue.

        Items the market does not stock yet are taken in and listed.
        """
        stock = self.items.get(item.name)
        if stock is None:
            revenue = int(item.value * _UNLISTED_MARKDOWN) * quantity
            self.add_item(item, quantity, int(item.value * 0.9), 0.1)
            return revenue
        margin = _SELL_MARGINS.get(self.market_type, _DEFAULT_SELL_MARGIN)
        revenue = int(stock.current_price * (1.0 - margin)) * quantity
        stock.quantity += quantity
        stock.supply_level = min(stock.supply_level * 1.02, 1.5)
        stock.reprice(self.clock())
        return revenue

    def _simulate(self, stock: MarketItem) -> None:
        if stock.production_rate > 0:
            stock.quantity += stock.production_rate
            stock.supply_level = min(stock.supply_level * 1.01, 2.0)
        if stock.consumption_rate > 0:
            consumed = min(stock.consumption_rate, stock.quantity)
            stock.quantity -= consumed
            if consumed == stock.consumption_rate:
                stock.demand_level = max(stock.demand_level * 0.99, 0.5)
            else:
                stock.demand_level = min(stock.demand_level * 1.01, 2.0)
        swing = self.rng.random() * stock.price_volatility * 0.2
        if self.rng.random() < 0.5:
            stock.supply_level = min(stock.supply_level * (1.0 + swing), 2.0)
        else:
            stock.supply_level = max(stock.supply_level * (1.0 - swing), 0.5)

    def _active_orders(self) -> Iterator[TradeOrder]:
        return (order for order in self.trade_orders if order.status is OrderStatus.ACTIVE)

    def update_market(self, game_time: int) -> None:
        """Advance the market one cycle.

        Pending events are applied, production, consumption and random swings
        move every price, triggered orders complete and expired ones are
        cancelled. Events last a single cycle.
        """
        self.last_update = game_time
        for event in list(self.local_events):
            self.apply_event(event)

        now = self.clock()
        for stock in self.items.values():
            self._simulate(stock)
            stock.reprice(now)

        for order in self._active_orders():
            stock = self.items.get(order.item_name)
            if stock is not None and order.is_triggered_by(stock.current_price):
                order.status = OrderStatus.COMPLETED
                order.executed_at = now

        for order in self._active_orders():
            if order.is_expired(now):
                order.status = OrderStatus.CANCELLED

        if self.rng.random() < RANDOM_EVENT_CHANCE:
            self.generate_random_event()
        self.local_events.clear()

    def apply_event(self, event: EconomicEvent) -> None:
        """Apply an economic event to this market."""
        self.tax_rate = event.apply(self.items, self.tax_rate)

    def generate_random_event(self) -> EconomicEvent | None:
        """Queue a random event for the next update and return it."""
        event = random_event(self.items.keys(), self.rng)
        if event is not None:
            self.local_events.append(event)
        return event

    def price_trend(self, item_name: str) -> tuple[float, str] | None:
        """Recent percent change and trend label, or None if the item is not stocked."""
        stock = self.items.get(item_name)
        return stock.price_trend() if stock is not None else None

    def _place_order(
        self,
        order_type: OrderType,
        player_id: str,
        item_name: str,
        quantity: int,
        target_price: int,
        expires_at: int | None,
        notes: str,
    ) -> UUID:
        order = TradeOrder(
            player_id=player_id,
            system_id=self.system_id,
            item_name=item_name,
            order_type=order_type,
            quantity=quantity,
            target_price=target_price,
            created_at=self.clock(),
            expires_at=expires_at,
            notes=notes,
        )
        self.trade_orders.append(order)
        return order.id

    def create_buy_order(
        self,
        player_id: str,
        item_name: str,
        quantity: int,
        target_price: int,
        expires_at: int | None = None,
        notes: str = "",
    ) -> UUID:
        """Place an order to buy once the price falls to the target."""
        if item_name not in self.items:
            raise MarketError(f"{item_name!r} is not traded in market {self.system_id!r}")
        return self._place_order(
            OrderType.BUY, player_id, item_name, quantity, target_price, expires_at, notes
        )

    def create_sell_order(
        self,
        player_id: str,
        item_name: str,
        quantity: int,
        target_price: int,
        expires_at: int | None = None,
        notes: str = "",
    ) -> UUID:
        """Place an order to sell once the price rises to the target."""
        return self._place_order(
            OrderType.SELL, player_id, item_name, quantity, target_price, expires_at, notes
        )

    def cancel_order(self, order_id: UUID, player_id: str) -> bool:
        """Cancel a player's active order; return False if there is none to cancel."""
        for order in self._active_orders():
            if order.id == order_id and order.player_id == player_id:
                order.status = OrderStatus.CANCELLED
                return True
        return False

    def player_orders(self, player_id: str) -> list[TradeOrder]:
        """The player's active orders."""
        return [order for order in self._active_orders() if order.player_id == player_id]

    def process_orders(
        self, inventory: MutableMapping[Item, int], credits: int
    ) -> tuple[list[TradeOrder], int]:
        """Execute the orders whose conditions are met for a player.

        The inventory is updated in place. Returns the executed orders and the
        player's credits afterwards. Expired orders are cancelled.
        """
        now = self.clock()
        pending: list[tuple[TradeOrder, int, Item | None]] = []
        for order in self._active_orders():
            if order.is_expired(now):
                order.status = OrderStatus.CANCELLED
                continue
            stock = self.items.get(order.item_name)
            if stock is None or not order.is_triggered_by(stock.current_price):
                continue
            if order.order_type is OrderType.BUY:
                cost = self._purchase_cost(stock.current_price, order.quantity)
                if credits >= cost and stock.quantity >= order.quantity:
                    pending.append((order, cost, None))
            else:
                held = next(
                    ((item, count) for item, count in inventory.items()
                     if item.name == order.item_name),
                    None,
                )
                if held is not None and held[1] >= order.quantity:
                    pending.append((order, 0, held[0]))

        executed: list[TradeOrder] = []
        for order, cost, item in pending:
            if order.order_type is OrderType.BUY:
                if credits < cost:
                    continue
                try:
                    bought, count, _ = self.buy_item(order.item_name, order.quantity)
                except MarketError:
                    continue
                credits -= cost
                inventory[bought] = inventory.get(bought, 0) + count
            else:
                if item is None or inventory.get(item, 0) < order.quantity:
                    continue
                credits += self.sell_item(item, order.quantity)
                remaining = inventory[item] - order.quantity
                if remaining:
                    inventory[item] = remaining
                else:
                    del inventory[item]
            order.status = OrderStatus.COMPLETED
            order.executed_at = now
            executed.append(replace(order))
        return executed, credits


def market_for(system_id: str, market_type: MarketType = MarketType.TRADING) -> Market:
    """Create an empty market of the given type with that type's tax rate."""
    return Market(system_id=system_id, market_type=market_type, tax_rate=market_type.tax_rate())