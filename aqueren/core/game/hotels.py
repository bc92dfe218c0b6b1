"""
Hotel chains and the stock pricing model.
"""

from enum import Enum


class HotelTier(Enum):
    """Price tier of a hotel chain."""

    CHEAP = "cheap"
    MEDIUM = "medium"
    EXPENSIVE = "expensive"


class Hotel(Enum):
    """The seven hotel chains."""

    LUXOR = "Luxor"
    TOWER = "Tower"
    AMERICAN = "American"
    FESTIVAL = "Festival"
    WORLDWIDE = "Worldwide"
    CONTINENTAL = "Continental"
    IMPERIAL = "Imperial"

    @property
    def tier(self) -> HotelTier:
        return HOTEL_TIERS[self]

    @property
    def key(self) -> str:
        """Lower-case name used for share fields, e.g. 'luxor'."""
        return self.name.lower()

    @classmethod
    def parse(cls, text: str) -> "Hotel":
        """Look up a hotel by name, case-insensitively."""
        needle = text.strip().lower()
        for hotel in cls:
            if hotel.key == needle:
                return hotel
        raise ValueError(f"Unknown hotel: {text!r}")


HOTEL_TIERS = {
    Hotel.LUXOR: HotelTier.CHEAP,
    Hotel.TOWER: HotelTier.CHEAP,
    Hotel.AMERICAN: HotelTier.MEDIUM,
    Hotel.FESTIVAL: HotelTier.MEDIUM,
    Hotel.WORLDWIDE: HotelTier.MEDIUM,
    Hotel.CONTINENTAL: HotelTier.EXPENSIVE,
    Hotel.IMPERIAL: HotelTier.EXPENSIVE,
}

TIER_BASE_PRICES = {
    HotelTier.CHEAP: 200,
    HotelTier.MEDIUM: 300,
    HotelTier.EXPENSIVE: 400,
}

# (largest chain size in bracket, level); anything larger is level 8
PRICE_LEVELS = [
    (2, 0),
    (3, 1),
    (4, 2),
    (5, 3),
    (10, 4),
    (20, 5),
    (30, 6),
    (40, 7),
]
MAX_PRICE_LEVEL = 8


def base_price(hotel: Hotel) -> int:
    """Per-share price of a hotel at the smallest chain size."""
    return TIER_BASE_PRICES[hotel.tier]


def price_level(chain_size: int) -> int:
    """
    Map a chain size onto its price level.

    Sizes below 2 (a hotel with no chain on the board) price at level 0.
    """
    for upper, level in PRICE_LEVELS:
        if chain_size <= upper:
            return level
    return MAX_PRICE_LEVEL


def stock_price(hotel: Hotel, chain_size: int) -> int:
    """Price of one share of `hotel` when its chain has `chain_size` tiles."""
    return base_price(hotel) + 100 * price_level(chain_size)
