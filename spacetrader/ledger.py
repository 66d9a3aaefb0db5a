"""Contracts between players and the price trend record of traded items."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from spacetrader.items import Item

TREND_BUCKET_SECONDS = 3600
TREND_LIMIT = 24


class ContractStatus(Enum):
    """Lifecycle state of a contract."""

    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELED = "Canceled"
    DISPUTED = "Disputed"


@dataclass
class ContractProgress:
    """A progress note on a contract, with any items delivered by name."""

    timestamp: int
    update_by: str
    message: str
    items_delivered: list[tuple[str, int]] = field(default_factory=list)


@dataclass
class MarketContract:
    """An agreement to deliver items in exchange for credits and items."""

    id: str
    issuer_id: str
    title: str
    description: str
    created_at: int
    items_required: list[tuple[Item, int]] = field(default_factory=list)
    reward_credits: int = 0
    reward_items: list[tuple[Item, int]] = field(default_factory=list)
    deadline: int | None = None
    assignee_ids: list[str] = field(default_factory=list)
    status: ContractStatus = ContractStatus.OPEN
    progress: list[ContractProgress] = field(default_factory=list)
    terms: list[str] = field(default_factory=list)
    is_public: bool = True


@dataclass
class PriceTrend:
    """Trading activity of one item within one hour."""

    item_name: str
    average_price: int
    lowest_price: int
    highest_price: int
    volume_traded: int
    timestamp: int


@dataclass
class ItemMarketStatistics:
    """Summary of the current listings and past sales of one item."""

    item_name: str
    current_listings_count: int
    current_quantity_available: int
    current_min_price: int
    current_max_price: int
    current_avg_price: int
    recent_sales_count: int
    recent_sales_volume: int
    recent_sales_value: int
    price_change_percent: int
    price_history: list[PriceTrend] | None = None


def record_trend(
    trends: list[PriceTrend], item_name: str, price: int, quantity: int, now: int
) -> PriceTrend:
    """Record a sale in an item's hourly trend list and return the affected entry.

    A sale in the same hour as the latest entry is folded into it with a
    volume-weighted average; otherwise a new entry is started. Only the most
    recent hours are kept.
    """
    if price < 0 or quantity < 0:
        raise ValueError("price and quantity cannot be negative")
    hour = now - now % TREND_BUCKET_SECONDS

    if trends and trends[-1].timestamp == hour:
        last = trends[-1]
        total_volume = last.volume_traded + quantity
        if total_volume > 0:
            last.average_price = (
                last.average_price * last.volume_traded + price * quantity
            ) // total_volume
        last.lowest_price = min(price, last.lowest_price)
        last.highest_price = max(price, last.highest_price)
        last.volume_traded = total_volume
        return last

    trend = PriceTrend(
        item_name=item_name,
        average_price=price,
        lowest_price=price,
        highest_price=price,
        volume_traded=quantity,
        timestamp=hour,
    )
    trends.append(trend)
    del trends[:-TREND_LIMIT]
    return trend