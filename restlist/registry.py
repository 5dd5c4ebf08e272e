"""Ordered registry of restaurant lists with a single selection.

The registry owns every list it holds. It keeps the selected index valid
across removals and publishes an event for every change to the selection or
to the contents of a registered list, so subscribers (the selection
controller in particular) never observe a stale view.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from restlist.core.exceptions import ListIndexError, NoSelectionError, RegistryError
from restlist.core.models import Restaurant, RestaurantList
from restlist.events import EventBus, EventPublisher, EventType

logger = logging.getLogger(__name__)


class ListRegistry(EventPublisher):
    """Ordered set of restaurant lists plus the current selection."""

    def __init__(
        self,
        lists: Iterable[RestaurantList] = (),
        event_bus: EventBus | None = None,
    ):
        """Initialize registry.

        Args:
            lists: Seed lists, registered in order
            event_bus: Bus to publish changes on, a private one by default

        Raises:
            RegistryError: If a seed list already belongs to a registry
        """
        super().__init__(event_bus or EventBus())
        self._lists: list[RestaurantList] = []
        self._selected_index: int | None = None

        try:
            for restaurant_list in lists:
                self.add_list(restaurant_list)
        except (TypeError, RegistryError):
            # Release seeds bound before the failure
            for restaurant_list in self._lists:
                restaurant_list._bind(None)
            raise

    def __len__(self) -> int:
        return len(self._lists)

    def __iter__(self) -> Iterator[RestaurantList]:
        return iter(tuple(self._lists))

    @property
    def lists(self) -> tuple[RestaurantList, ...]:
        """Registered lists in display order."""
        return tuple(self._lists)

    @property
    def selected_index(self) -> int | None:
        """Index of the selected list, or None."""
        return self._selected_index

    def get(self, index: int) -> RestaurantList:
        """Get the list at an index.

        Raises:
            ListIndexError: If the index is out of range
        """
        self._check_index(index)
        return self._lists[index]

    def index_of(self, restaurant_list: RestaurantList) -> int:
        """Get the index of a registered list (by identity).

        Raises:
            ValueError: If the list is not registered here
        """
        for i, candidate in enumerate(self._lists):
            if candidate is restaurant_list:
                return i
        raise ValueError(f"List {restaurant_list.name!r} is not registered")

    def find(self, name: str) -> int | None:
        """Get the index of the first list with the given name."""
        for i, restaurant_list in enumerate(self._lists):
            if restaurant_list.name == name:
                return i
        return None

    def selected_list(self) -> RestaurantList | None:
        """Get the selected list, or None when nothing is selected."""
        if self._selected_index is None:
            return None
        return self._lists[self._selected_index]

    def add_list(self, restaurant_list: RestaurantList) -> int:
        """Append a list without changing the selection.

        Args:
            restaurant_list: List to register

        Returns:
            Index of the new list

        Raises:
            RegistryError: If the list already belongs to a registry
        """
        if not isinstance(restaurant_list, RestaurantList):
            raise TypeError(
                f"expected RestaurantList, got {type(restaurant_list).__name__}"
            )
        if restaurant_list.is_bound:
            raise RegistryError(
                f"List {restaurant_list.name!r} is already registered"
            )

        restaurant_list._bind(self._list_changed)
        self._lists.append(restaurant_list)
        index = len(self._lists) - 1

        logger.debug(f"Added list {restaurant_list.name!r} at index {index}")
        self._publish_event(EventType.LIST_ADDED, index=index, list=restaurant_list)
        return index

    def create_list(self, name: str) -> RestaurantList:
        """Create an empty list, register it and return it.

        Raises:
            ValidationError: If the name is blank
        """
        restaurant_list = RestaurantList(name)
        self.add_list(restaurant_list)
        return restaurant_list

    def remove_at(self, index: int) -> RestaurantList:
        """Remove the list at an index, keeping the selection consistent.

        Removing the selected list clears the selection. Removing a list
        before the selection shifts the selected index down by one so it keeps
        pointing at the same list.

        Args:
            index: Index of the list to remove

        Returns:
            The removed list

        Raises:
            ListIndexError: If the index is out of range
        """
        self._check_index(index)

        previous = self._selected_index
        removed = self._lists.pop(index)
        removed._bind(None)

        if previous is not None:
            if index == previous:
                self._selected_index = None
            elif index < previous:
                self._selected_index = previous - 1

        logger.debug(
            f"Removed list {removed.name!r} at index {index}; "
            f"selection {previous} -> {self._selected_index}"
        )
        self._publish_event(
            EventType.LIST_REMOVED,
            index=index,
            list=removed,
            previous_selection=previous,
            selection=self._selected_index,
        )
        return removed

    def select(self, index: int | None) -> None:
        """Select the list at an index, or clear the selection with None.

        Raises:
            ListIndexError: If the index is out of range
        """
        if index is not None:
            self._check_index(index)

        previous = self._selected_index
        if index == previous:
            return

        self._selected_index = index
        logger.debug(f"Selection {previous} -> {index}")
        self._publish_event(
            EventType.SELECTION_CHANGED,
            index=index,
            previous_selection=previous,
            list=self.selected_list(),
        )

    def add_to_selected(self, restaurant: Restaurant) -> bool:
        """Add a restaurant to the selected list.

        Returns:
            True if added, False if the list already has that name

        Raises:
            NoSelectionError: If no list is selected
        """
        selected = self.selected_list()
        if selected is None:
            raise NoSelectionError("add restaurant")
        return selected.add(restaurant)

    def _list_changed(
        self, restaurant_list: RestaurantList, added: list[Restaurant]
    ) -> None:
        index = self.index_of(restaurant_list)
        logger.debug(
            f"List {restaurant_list.name!r} gained {len(added)} restaurant(s)"
        )
        self._publish_event(
            EventType.LIST_UPDATED,
            index=index,
            list=restaurant_list,
            added=list(added),
        )

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        if not 0 <= index < len(self._lists):
            raise ListIndexError(index, len(self._lists))
