"""Interactive terminal session over a list registry.

The session plays the part of the main window: it shows the lists, lets the
user pick one, and wires the add / new list / merge actions to the core. It
renders whatever the selection controller pushes instead of tracking view
state itself.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.prompt import Prompt

from restlist.cli.output import (
    lists_table,
    print_error,
    print_success,
    print_warning,
    view_table,
)
from restlist.controller import SelectionController, ViewState
from restlist.core.exceptions import RestlistError, ValidationError
from restlist.core.models import Restaurant, parse_rating
from restlist.operations.merge import MergeService
from restlist.registry import ListRegistry

logger = logging.getLogger(__name__)

ACTIONS = ["select", "add", "new", "merge", "quit"]

ACTIONS_DISABLED_HINT = (
    "Select a list first; adding and merging need at least two lists"
)


class ShellSession:
    """Menu-driven session for browsing and editing restaurant lists."""

    def __init__(self, registry: ListRegistry, console: Console):
        self.registry = registry
        self.console = console
        self.controller = SelectionController(registry)
        self.merger = MergeService(registry)
        self.controller.subscribe(self._render_view)

    def run(self) -> None:
        """Run the menu loop until the user quits or input ends."""
        self.console.print(lists_table(self.registry))

        while True:
            try:
                action = Prompt.ask(
                    "Action", choices=ACTIONS, default="quit", console=self.console
                )
            except EOFError:
                self.console.print()
                break

            if action == "quit":
                break

            logger.debug(f"Shell action: {action}")
            try:
                getattr(self, f"_do_{action}")()
            except EOFError:
                self.console.print()
                break
            except RestlistError as e:
                print_error(self.console, str(e))

        self.controller.detach()

    def _render_view(self, view: ViewState) -> None:
        self.console.print(view_table(view))
        if view.has_selection and not view.actions_enabled:
            self.console.print(f"[dim]{ACTIONS_DISABLED_HINT}[/dim]")

    def _do_select(self) -> None:
        if not len(self.registry):
            print_warning(self.console, "There are no lists yet")
            return

        self.console.print(lists_table(self.registry))
        choices = [str(i) for i in range(len(self.registry) + 1)]
        answer = Prompt.ask(
            "List number (0 clears the selection)",
            choices=choices,
            show_choices=False,
            console=self.console,
        )
        number = int(answer)
        self.registry.select(None if number == 0 else number - 1)

    def _do_add(self) -> None:
        if not self.controller.actions_enabled:
            print_warning(self.console, ACTIONS_DISABLED_HINT)
            return

        name = Prompt.ask("Restaurant name", console=self.console).strip()
        rating_text = Prompt.ask(
            "Rating (blank for none)",
            default="",
            show_default=False,
            console=self.console,
        )

        try:
            restaurant = Restaurant(name, parse_rating(rating_text))
        except ValidationError as e:
            print_warning(self.console, str(e))
            return

        target = self.controller.view.list_name
        if self.registry.add_to_selected(restaurant):
            print_success(self.console, f"Added {restaurant.name!r} to {target!r}")
        else:
            print_warning(
                self.console, f"{restaurant.name!r} is already in {target!r}"
            )

    def _do_new(self) -> None:
        name = Prompt.ask("List name", console=self.console).strip()

        try:
            restaurant_list = self.registry.create_list(name)
        except ValidationError as e:
            print_warning(self.console, str(e))
            return

        self.registry.select(self.registry.index_of(restaurant_list))
        print_success(self.console, f"Created list {restaurant_list.name!r}")

    def _do_merge(self) -> None:
        if not self.controller.actions_enabled:
            print_warning(self.console, ACTIONS_DISABLED_HINT)
            return

        target_index = self.registry.selected_index
        target = self.registry.get(target_index)
        candidates = self.merger.candidates(target_index)

        for i, restaurant_list in candidates:
            self.console.print(f"  {i + 1}. {restaurant_list.name} ({len(restaurant_list)})")

        choices = ["0"] + [str(i + 1) for i, _ in candidates]
        answer = Prompt.ask(
            f"Merge which list into {target.name!r}? (0 cancels)",
            choices=choices,
            show_choices=False,
            console=self.console,
        )
        source_index = None if answer == "0" else int(answer) - 1

        result = self.merger.merge_into_selected(source_index)
        if result is None:
            self.console.print("Merge cancelled")
            return

        print_success(
            self.console,
            f"Merged {result.source_name!r} into {result.target_name!r} "
            f"({result.added_count} added, {len(result.skipped)} already present)",
        )
        self.console.print(lists_table(self.registry))
