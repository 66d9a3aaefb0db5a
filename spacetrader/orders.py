"""Standing trade orders that fire when a market price reaches a target."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


class OrderType(Enum):
    BUY = "Buy"
    SELL = "Sell"


class OrderStatus(Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    FAILED = "Failed"
    EXPIRED = "Expired"


@dataclass
class TradeOrder:
    """A player's order to buy below, or sell above, a target price."""

    player_id: str
    system_id: str
    item_name: str
    order_type: OrderType
    quantity: int
    target_price: int
    status: OrderStatus = OrderStatus.ACTIVE
    created_at: int = 0
    expires_at: int | None = None
    executed_at: int | None = None
    notes: str = ""
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def price_condition(self) -> str:
        """"below" for buy orders, "above" for sell orders."""
        return "below" if self.order_type is OrderType.BUY else "above"

    def is_triggered_by(self, price: int) -> bool:
        """Return True if the given market price meets this order's target."""
        if self.order_type is OrderType.BUY:
            return price <= self.target_price
        return price >= self.target_price

    def is_expired(self, now: int) -> bool:
        """Return True if the order has an expiry time and it has passed."""
        return self.expires_at is not None and now > self.expires_at