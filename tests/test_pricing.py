"""
Tests for hotel tiers and the share price table.
"""

import pytest

from aqueren.core.game import Hotel, HotelTier, stock_price
from aqueren.core.game.hotels import price_level


def test_hotel_tiers():
    assert Hotel.LUXOR.tier == HotelTier.CHEAP
    assert Hotel.TOWER.tier == HotelTier.CHEAP
    assert Hotel.AMERICAN.tier == HotelTier.MEDIUM
    assert Hotel.FESTIVAL.tier == HotelTier.MEDIUM
    assert Hotel.WORLDWIDE.tier == HotelTier.MEDIUM
    assert Hotel.CONTINENTAL.tier == HotelTier.EXPENSIVE
    assert Hotel.IMPERIAL.tier == HotelTier.EXPENSIVE


@pytest.mark.parametrize(
    "size,level",
    [(0, 0), (2, 0), (3, 1), (4, 2), (5, 3), (6, 4), (10, 4), (11, 5), (20, 5), (21, 6), (31, 7), (40, 7), (41, 8), (108, 8)],
)
def test_price_levels(size, level):
    assert price_level(size) == level


def test_stock_price_by_tier():
    assert stock_price(Hotel.LUXOR, 2) == 200
    assert stock_price(Hotel.AMERICAN, 2) == 300
    assert stock_price(Hotel.IMPERIAL, 2) == 400


def test_stock_price_grows_with_chain():
    assert stock_price(Hotel.TOWER, 3) == 300
    assert stock_price(Hotel.FESTIVAL, 7) == 700
    assert stock_price(Hotel.CONTINENTAL, 41) == 1200


def test_inactive_hotel_prices_at_base():
    assert stock_price(Hotel.LUXOR, 0) == 200


def test_hotel_parse_is_case_insensitive():
    assert Hotel.parse("luxor") == Hotel.LUXOR
    assert Hotel.parse("WorldWide") == Hotel.WORLDWIDE
    with pytest.raises(ValueError):
        Hotel.parse("Sackson")
