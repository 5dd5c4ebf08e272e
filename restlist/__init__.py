"""Organize restaurants into named lists, select, extend and merge them."""

from restlist.controller import SelectionController, SelectionState, ViewState
from restlist.core import (
    InvalidMergeError,
    ListIndexError,
    NoSelectionError,
    Restaurant,
    RestaurantList,
    RestlistError,
    ValidationError,
    parse_rating,
)
from restlist.operations import MergeResult, MergeService, merge_lists
from restlist.registry import ListRegistry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Restaurant",
    "RestaurantList",
    "parse_rating",
    "ListRegistry",
    "SelectionController",
    "SelectionState",
    "ViewState",
    "MergeService",
    "MergeResult",
    "merge_lists",
    "RestlistError",
    "ValidationError",
    "ListIndexError",
    "InvalidMergeError",
    "NoSelectionError",
]
