import random

import pytest

from spacetrader.events import EconomicEvent, EconomicEventKind, random_event
from spacetrader.items import Item, ItemKind, ItemType, ResourceType
from spacetrader.pricing import MarketItem

K = EconomicEventKind


def make_stock(name, kind=ItemKind.RESOURCE, price=100, supply=1.0, demand=1.0):
    item_type = (
        ItemType(kind, ResourceType.MINERAL) if kind is ItemKind.RESOURCE else ItemType(kind)
    )
    item = Item(name, price, 1, item_type)
    return MarketItem(
        item=item,
        quantity=10,
        base_price=price,
        current_price=price,
        supply_level=supply,
        demand_level=demand,
    )


@pytest.fixture
def stocks():
    return {
        "Iron": make_stock("Iron"),
        "Rifle": make_stock("Rifle", ItemKind.EQUIPMENT, 400),
        "Luxury Goods": make_stock("Luxury Goods", ItemKind.PRODUCT, 800),
    }


def test_item_event_requires_name():
    with pytest.raises(ValueError):
        EconomicEvent(K.SHORTAGE)


def test_global_event_rejects_name():
    with pytest.raises(ValueError):
        EconomicEvent(K.TARIFF_INCREASE, "Iron")


def test_shortage_lowers_supply_to_floor(stocks):
    stocks["Iron"].supply_level = 0.35
    EconomicEvent(K.SHORTAGE, "Iron").apply(stocks, 0.05)
    assert stocks["Iron"].supply_level == pytest.approx(0.3)


def test_surplus_raises_supply_and_caps(stocks):
    event = EconomicEvent(K.SURPLUS, "Iron")
    event.apply(stocks, 0.05)
    assert stocks["Iron"].supply_level > 1.0
    for _ in range(20):
        event.apply(stocks, 0.05)
    assert stocks["Iron"].supply_level == pytest.approx(2.0)


def test_demand_events_move_demand_in_opposite_directions(stocks):
    EconomicEvent(K.HIGH_DEMAND, "Rifle").apply(stocks, 0.05)
    EconomicEvent(K.LOW_DEMAND, "Iron").apply(stocks, 0.05)
    assert stocks["Rifle"].demand_level > 1.0
    assert stocks["Iron"].demand_level < 1.0


def test_item_event_for_unknown_item_changes_nothing(stocks):
    before = {name: (s.supply_level, s.demand_level) for name, s in stocks.items()}
    tax = EconomicEvent(K.SHORTAGE, "Gold").apply(stocks, 0.05)
    after = {name: (s.supply_level, s.demand_level) for name, s in stocks.items()}
    assert after == before
    assert tax == 0.05


def test_tariff_increase_is_capped(stocks):
    event = EconomicEvent(K.TARIFF_INCREASE)
    tax = event.apply(stocks, 0.05)
    assert tax > 0.05
    assert event.apply(stocks, 0.24) == pytest.approx(0.25)


def test_tariff_decrease_reaches_fixed_floor(stocks):
    event = EconomicEvent(K.TARIFF_DECREASE)
    tax = 0.05
    assert event.apply(stocks, tax) < tax
    for _ in range(100):
        tax = event.apply(stocks, tax)
    assert tax > 0
    assert event.apply(stocks, tax) == tax


def test_crash_and_boom_move_prices_and_values(stocks):
    before = {name: s.current_price for name, s in stocks.items()}
    EconomicEvent(K.MARKET_CRASH).apply(stocks, 0.05)
    for name, stock in stocks.items():
        assert stock.current_price < before[name]
        assert stock.item.value == stock.current_price
    crashed = {name: s.current_price for name, s in stocks.items()}
    EconomicEvent(K.MARKET_BOOM).apply(stocks, 0.05)
    for name, stock in stocks.items():
        assert stock.current_price > crashed[name]
        assert stock.item.value == stock.current_price


def test_conflict_favours_equipment_over_products(stocks):
    EconomicEvent(K.LOCAL_CONFLICT).apply(stocks, 0.05)
    assert stocks["Rifle"].demand_level > 1.0
    assert stocks["Luxury Goods"].demand_level < 1.0
    assert stocks["Iron"].demand_level == 1.0


def test_peace_favours_products_over_equipment(stocks):
    EconomicEvent(K.LOCAL_PEACE).apply(stocks, 0.05)
    assert stocks["Rifle"].demand_level < 1.0
    assert stocks["Luxury Goods"].demand_level > 1.0
    assert stocks["Iron"].demand_level == 1.0


def test_random_event_without_items_is_none():
    assert random_event([], random.Random(1)) is None


def test_random_event_covers_every_kind_and_names_known_items():
    rng = random.Random(3)
    names = ["Iron", "Water", "Gold"]
    seen = set()
    for _ in range(1000):
        event = random_event(names, rng)
        seen.add(event.kind)
        assert event.item_name is None or event.item_name in names
    assert seen == set(EconomicEventKind)


def test_random_event_is_reproducible_with_seed():
    names = ["Iron", "Water"]
    first = [random_event(names, random.Random(9)) for _ in range(3)]
    second = [random_event(names, random.Random(9)) for _ in range(3)]
    assert first == second