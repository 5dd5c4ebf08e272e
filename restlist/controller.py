"""Selection controller deriving the active view from the registry.

The controller is a two-state machine (no selection / has selection) driven
by registry events. After every event it recomputes a ``ViewState`` and, when
that differs from the last one, pushes it to its subscribers before the
registry call that caused it returns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from restlist.core.models import Restaurant
from restlist.events import Event, EventType
from restlist.registry import ListRegistry

logger = logging.getLogger(__name__)

# Adding or merging needs a target plus a second list to merge from
MIN_LISTS_FOR_ACTIONS = 2


class SelectionState(Enum):
    """States of the selection controller."""

    NO_SELECTION = "no_selection"
    HAS_SELECTION = "has_selection"


@dataclass(frozen=True)
class ViewState:
    """Snapshot pushed to controller subscribers."""

    state: SelectionState
    selected_index: int | None
    list_name: str | None
    restaurants: tuple[Restaurant, ...]
    actions_enabled: bool

    @property
    def has_selection(self) -> bool:
        """Check if a list is selected."""
        return self.state is SelectionState.HAS_SELECTION

    def names(self) -> list[str]:
        """Get names of the restaurants in the active view."""
        return [r.name for r in self.restaurants]


ViewHandler = Callable[[ViewState], None]

_WATCHED_EVENTS = (
    EventType.LIST_ADDED,
    EventType.LIST_REMOVED,
    EventType.LIST_UPDATED,
    EventType.SELECTION_CHANGED,
    EventType.LISTS_MERGED,
)


class SelectionController:
    """Publishes the active view and the enabled signal for list actions."""

    def __init__(self, registry: ListRegistry):
        self.registry = registry
        self._handlers: list[ViewHandler] = []
        self._view = self._compute()

        for event_type in _WATCHED_EVENTS:
            registry.event_bus.subscribe(event_type, self._on_event)

    @property
    def view(self) -> ViewState:
        """Current view state."""
        return self._view

    @property
    def state(self) -> SelectionState:
        """Current selection state."""
        return self._view.state

    @property
    def active_view(self) -> tuple[Restaurant, ...]:
        """Restaurants of the selected list, empty without a selection."""
        return self._view.restaurants

    @property
    def actions_enabled(self) -> bool:
        """Whether "add restaurant" and "merge" may be used."""
        return self._view.actions_enabled

    def subscribe(self, handler: ViewHandler) -> None:
        """Receive a ViewState each time the view or enabled signal changes."""
        self._handlers.append(handler)

    def unsubscribe(self, handler: ViewHandler) -> None:
        """Stop receiving view updates."""
        self._handlers.remove(handler)

    def detach(self) -> None:
        """Stop listening to the registry."""
        for event_type in _WATCHED_EVENTS:
            self.registry.event_bus.unsubscribe(event_type, self._on_event)

    def refresh(self) -> ViewState:
        """Recompute the view and publish it if it changed."""
        view = self._compute()
        if view != self._view:
            previous, self._view = self._view, view
            if previous.state is not view.state:
                logger.debug(f"Selection state {previous.state.name} -> {view.state.name}")
            for handler in list(self._handlers):
                try:
                    handler(view)
                except Exception:
                    logger.exception("View handler failed")
        return self._view

    def _on_event(self, event: Event) -> None:
        self.refresh()

    def _compute(self) -> ViewState:
        selected = self.registry.selected_list()
        if selected is None:
            return ViewState(
                state=SelectionState.NO_SELECTION,
                selected_index=None,
                list_name=None,
                restaurants=(),
                actions_enabled=False,
            )

        return ViewState(
            state=SelectionState.HAS_SELECTION,
            selected_index=self.registry.selected_index,
            list_name=selected.name,
            restaurants=selected.restaurants,
            actions_enabled=len(self.registry) >= MIN_LISTS_FOR_ACTIONS,
        )
