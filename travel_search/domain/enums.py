"""Domain enums."""

from enum import Enum


class TravelClass(str, Enum):
    ECONOMY = "economy"
    BUSINESS = "business"
    FIRST = "first"


class ConnectionPreference(str, Enum):
    SHORTER = "shorter"
    LONGER = "longer"
    ANY = "any"


class SortOrder(str, Enum):
    NONE = "none"
    RECOMMENDED = "recommended"
