"""Tests for the selection controller."""

from unittest.mock import Mock

import pytest

from restlist.controller import SelectionController, SelectionState
from restlist.core.models import Restaurant, RestaurantList
from restlist.registry import ListRegistry


class TestInitialState:
    """Test the controller before any interaction."""

    def test_starts_without_selection(self, controller):
        """No selection, empty view, actions disabled."""
        assert controller.state is SelectionState.NO_SELECTION
        assert controller.active_view == ()
        assert controller.actions_enabled is False

    def test_picks_up_existing_selection(self, registry):
        """A controller created after selecting reflects that selection."""
        registry.select(1)

        controller = SelectionController(registry)

        assert controller.state is SelectionState.HAS_SELECTION
        assert controller.view.names() == ["Green Dragon", "Cactus"]


class TestTransitions:
    """Test state transitions and the published view."""

    def test_select_publishes_view(self, registry, controller, views):
        """Selecting a list publishes its members in order."""
        registry.select(0)

        assert len(views) == 1
        view = views[0]
        assert view.state is SelectionState.HAS_SELECTION
        assert view.selected_index == 0
        assert view.list_name == "La1"
        assert view.names() == ["McDonald's", "Starbucks"]
        assert view.actions_enabled is True

    def test_switch_selection(self, registry, controller, views):
        """Selecting another list replaces the view."""
        registry.select(0)
        registry.select(1)

        assert controller.state is SelectionState.HAS_SELECTION
        assert views[-1].names() == ["Green Dragon", "Cactus"]

    def test_select_none(self, registry, controller, views):
        """Clearing the selection empties the view."""
        registry.select(0)
        registry.select(None)

        assert controller.state is SelectionState.NO_SELECTION
        assert views[-1].restaurants == ()
        assert views[-1].actions_enabled is False

    def test_removing_selected_list(self, registry, controller, views):
        """Removing the selected list drives the view to empty."""
        registry.select(1)

        registry.remove_at(1)

        assert controller.state is SelectionState.NO_SELECTION
        assert controller.active_view == ()
        assert views[-1].selected_index is None

    def test_removing_earlier_list_keeps_view(self, registry, controller):
        """Removing a list before the selection keeps the same active list."""
        registry.add_list(RestaurantList("La3", [Restaurant("Nando's")]))
        registry.select(2)

        registry.remove_at(0)

        assert controller.view.selected_index == 1
        assert controller.view.list_name == "La3"
        assert controller.view.names() == ["Nando's"]

    def test_add_restaurant_updates_view(self, registry, controller, views):
        """Adding to the selected list republishes the view."""
        registry.select(0)

        registry.add_to_selected(Restaurant("Cactus"))

        assert views[-1].names() == ["McDonald's", "Starbucks", "Cactus"]

    def test_direct_list_add_updates_view(self, registry, controller, la1):
        """Adding straight to the selected list cannot leave the view stale."""
        registry.select(0)

        la1.add(Restaurant("Cactus"))

        assert controller.view.names() == ["McDonald's", "Starbucks", "Cactus"]

    def test_change_to_other_list_publishes_nothing(
        self, registry, controller, views, la2
    ):
        """Changes outside the active view are not republished."""
        registry.select(0)
        count = len(views)

        la2.add(Restaurant("Nando's"))

        assert len(views) == count

    def test_does_not_auto_select_new_list(self, registry, controller):
        """Adding a list never selects it."""
        registry.create_list("La3")

        assert controller.state is SelectionState.NO_SELECTION


class TestActionsEnabled:
    """Test the enabled signal for add and merge."""

    def test_single_list_selected_is_disabled(self):
        """With one list, actions stay disabled even when it is selected."""
        registry = ListRegistry([RestaurantList("Only")])
        controller = SelectionController(registry)

        registry.select(0)

        assert controller.state is SelectionState.HAS_SELECTION
        assert controller.actions_enabled is False

    def test_second_list_enables_actions(self):
        """Adding a second list flips the signal without changing selection."""
        registry = ListRegistry([RestaurantList("Only")])
        controller = SelectionController(registry)
        views = []
        controller.subscribe(views.append)
        registry.select(0)

        registry.add_list(RestaurantList("Second"))

        assert controller.actions_enabled is True
        assert registry.selected_index == 0
        assert views[-1].actions_enabled is True

    def test_dropping_to_one_list_disables(self, registry, controller):
        """Removing down to a single list disables actions."""
        registry.select(0)

        registry.remove_at(1)

        assert controller.state is SelectionState.HAS_SELECTION
        assert controller.actions_enabled is False

    def test_no_selection_is_disabled(self, registry, controller):
        """Actions need a selection regardless of list count."""
        registry.create_list("La3")

        assert controller.actions_enabled is False


class TestSubscriptions:
    """Test subscribe, unsubscribe and refresh."""

    def test_unsubscribe(self, registry, controller):
        """Unsubscribed handlers get no further views."""
        handler = Mock()
        controller.subscribe(handler)
        controller.unsubscribe(handler)

        registry.select(0)

        handler.assert_not_called()

    def test_refresh_without_change(self, controller, views):
        """refresh publishes only when something changed."""
        view = controller.refresh()

        assert view is controller.view
        assert views == []

    def test_detach(self, registry, controller, views):
        """A detached controller ignores the registry."""
        controller.detach()

        registry.select(0)

        assert views == []
        assert controller.state is SelectionState.NO_SELECTION

    def test_failing_handler_does_not_block_others(self, registry, controller, caplog):
        """Later subscribers still get the view when an earlier one raises."""
        received = []
        controller.subscribe(Mock(side_effect=RuntimeError("boom")))
        controller.subscribe(received.append)

        registry.select(0)

        assert [view.selected_index for view in received] == [0]
        assert controller.view.selected_index == 0
        assert "View handler failed" in caplog.text

    def test_view_visible_before_call_returns(self, registry, controller):
        """Handlers run synchronously inside the registry call."""
        seen_during_call = []
        controller.subscribe(lambda view: seen_during_call.append(registry.selected_index))

        registry.select(1)

        assert seen_during_call == [1]

    @pytest.mark.parametrize("index", [0, 1])
    def test_view_matches_selected_list(self, registry, controller, index):
        """The active view always equals the selected list's members."""
        registry.select(index)

        assert controller.active_view == registry.selected_list().restaurants
