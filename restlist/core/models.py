"""Core data models for restaurant lists.

This module defines the two value types the rest of the package is built on:

- Restaurant: immutable record identified by its name
- RestaurantList: ordered, name-unique group of restaurants

Restaurant equality is name-only (exact, case-sensitive). That equality is what
RestaurantList uses to reject duplicates, so two restaurants with the same name
but different ratings can never both be members of one list.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from .exceptions import ListIndexError, ValidationError


def _check_name(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(field_name, f"must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ValidationError(field_name, "cannot be empty")
    return value


def parse_rating(text: str | None) -> float | None:
    """Parse a rating typed by the user.

    Args:
        text: Raw input text. Blank or None means "no rating".

    Returns:
        Parsed rating, or None when the input is blank

    Raises:
        ValidationError: If the text is not a finite number
    """
    if text is None or not text.strip():
        return None

    try:
        value = float(text.strip())
    except ValueError:
        raise ValidationError("rating", f"not a number: {text.strip()!r}") from None

    if not math.isfinite(value):
        raise ValidationError("rating", f"must be finite, got {text.strip()!r}")
    return value


@dataclass(frozen=True)
class Restaurant:
    """A named restaurant with an optional rating.

    Only ``name`` takes part in equality and hashing.
    """

    name: str
    rating: float | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        _check_name(self.name, "name")

        if self.rating is None:
            return
        if isinstance(self.rating, bool) or not isinstance(self.rating, (int, float)):
            raise ValidationError(
                "rating", f"must be a number, got {type(self.rating).__name__}"
            )
        try:
            value = float(self.rating)
        except OverflowError:
            raise ValidationError("rating", "too large to represent") from None
        if not math.isfinite(value):
            raise ValidationError("rating", f"must be finite, got {self.rating}")
        object.__setattr__(self, "rating", value)

    def __str__(self) -> str:
        if self.rating is None:
            return self.name
        return f"{self.name} ({self.rating:g})"


ChangeCallback = Callable[["RestaurantList", list[Restaurant]], None]


def _check_restaurant(value: object) -> None:
    if not isinstance(value, Restaurant):
        raise TypeError(f"expected Restaurant, got {type(value).__name__}")


class RestaurantList:
    """An ordered collection of restaurants with unique names.

    A list may be bound to one owner (a ListRegistry). While bound, every
    successful mutation is reported to the owner so views derived from the
    list are recomputed.
    """

    def __init__(self, name: str, restaurants: Iterable[Restaurant] = ()):
        """Create a list.

        Args:
            name: List name, must not be blank
            restaurants: Initial members, duplicates are skipped

        Raises:
            ValidationError: If the name is blank
        """
        self.name = _check_name(name, "list name")
        self._restaurants: list[Restaurant] = []
        self._on_change: ChangeCallback | None = None

        for restaurant in restaurants:
            self._append(restaurant)

    def __repr__(self) -> str:
        return f"RestaurantList(name={self.name!r}, size={len(self._restaurants)})"

    def __str__(self) -> str:
        return self.name

    def __len__(self) -> int:
        return len(self._restaurants)

    def __iter__(self) -> Iterator[Restaurant]:
        return iter(tuple(self._restaurants))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(r.name == item for r in self._restaurants)
        return item in self._restaurants

    @property
    def size(self) -> int:
        """Number of restaurants in the list."""
        return len(self._restaurants)

    @property
    def restaurants(self) -> tuple[Restaurant, ...]:
        """Snapshot of the members in insertion order."""
        return tuple(self._restaurants)

    @property
    def is_bound(self) -> bool:
        """Whether the list currently belongs to a registry."""
        return self._on_change is not None

    def names(self) -> list[str]:
        """Get member names in order."""
        return [r.name for r in self._restaurants]

    def get(self, index: int) -> Restaurant:
        """Get the restaurant at a position.

        Raises:
            ListIndexError: If index is outside ``0 <= index < size``
        """
        if not 0 <= index < len(self._restaurants):
            raise ListIndexError(index, len(self._restaurants), what="restaurant")
        return self._restaurants[index]

    def add(self, restaurant: Restaurant) -> bool:
        """Append a restaurant unless one with the same name is present.

        Args:
            restaurant: Restaurant to append

        Returns:
            True if appended, False if it was a duplicate
        """
        if not self._append(restaurant):
            return False
        self._notify([restaurant])
        return True

    def add_all(self, restaurants: Iterable[Restaurant]) -> list[Restaurant]:
        """Append each restaurant with the same duplicate rule as ``add``.

        Args:
            restaurants: Restaurants to append, in order

        Returns:
            Restaurants actually appended, in order
        """
        incoming = list(restaurants)
        for restaurant in incoming:
            _check_restaurant(restaurant)

        added = [r for r in incoming if self._append(r)]
        if added:
            self._notify(added)
        return added

    def _append(self, restaurant: Restaurant) -> bool:
        _check_restaurant(restaurant)
        if restaurant in self._restaurants:
            return False
        self._restaurants.append(restaurant)
        return True

    def _bind(self, callback: ChangeCallback | None) -> None:
        self._on_change = callback

    def _notify(self, added: list[Restaurant]) -> None:
        if self._on_change is not None:
            self._on_change(self, added)
