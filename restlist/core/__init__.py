"""Core domain models and exceptions for restaurant lists."""

from restlist.core.exceptions import (
    ConfigError,
    InvalidMergeError,
    ListIndexError,
    NoSelectionError,
    RegistryError,
    RestlistError,
    ValidationError,
)
from restlist.core.models import Restaurant, RestaurantList, parse_rating

__all__ = [
    # Models
    "Restaurant",
    "RestaurantList",
    "parse_rating",
    # Exceptions
    "RestlistError",
    "ValidationError",
    "ListIndexError",
    "InvalidMergeError",
    "NoSelectionError",
    "RegistryError",
    "ConfigError",
]
