"""Merge command for folding one restaurant list into another."""

import logging
from dataclasses import dataclass, field

from restlist.core.exceptions import InvalidMergeError
from restlist.core.models import Restaurant, RestaurantList
from restlist.events import EventPublisher, EventType
from restlist.registry import ListRegistry

logger = logging.getLogger(__name__)


@dataclass
class MergeCommand:
    """Command to merge the source list into the target list."""

    target_index: int | None
    source_index: int | None


@dataclass
class MergeResult:
    """Outcome of a completed merge."""

    target_name: str
    source_name: str
    added: list[Restaurant] = field(default_factory=list)
    skipped: list[Restaurant] = field(default_factory=list)

    @property
    def added_count(self) -> int:
        """Number of restaurants the target gained."""
        return len(self.added)


@dataclass
class MergePreconditions:
    """Preconditions for merge operations."""

    def check(self, command: MergeCommand, list_count: int) -> list[str]:
        """Check merge preconditions and return violations."""
        violations = []

        for label, index in (
            ("target", command.target_index),
            ("source", command.source_index),
        ):
            if index is None:
                violations.append(f"No {label} list given")
            elif isinstance(index, bool) or not isinstance(index, int):
                violations.append(f"{label.capitalize()} index must be an integer")
            elif not 0 <= index < list_count:
                violations.append(
                    f"{label.capitalize()} index {index} out of range ({list_count} lists)"
                )

        if (
            command.target_index is not None
            and command.target_index == command.source_index
        ):
            violations.append("Cannot merge a list into itself")

        return violations


class MergeService(EventPublisher):
    """Merges lists held by a registry."""

    def __init__(self, registry: ListRegistry):
        super().__init__(registry.event_bus)
        self.registry = registry
        self.preconditions = MergePreconditions()

    def merge(
        self, target_index: int | None, source_index: int | None
    ) -> MergeResult | None:
        """Merge the source list into the target and drop the source.

        Restaurants already in the target (by name) are skipped. The source
        is then removed from the registry, which adjusts the selection.

        Args:
            target_index: Index of the list that absorbs the other
            source_index: Index of the list to absorb, or None to do nothing

        Returns:
            Merge outcome, or None when no source was chosen

        Raises:
            InvalidMergeError: If an index is invalid or both are equal
        """
        if source_index is None:
            logger.debug("Merge skipped: no source list chosen")
            return None

        command = MergeCommand(target_index=target_index, source_index=source_index)
        violations = self.preconditions.check(command, len(self.registry))
        if violations:
            raise InvalidMergeError(violations)

        target = self.registry.get(target_index)
        source = self.registry.get(source_index)
        incoming = source.restaurants

        added = target.add_all(incoming)
        skipped = [r for r in incoming if r not in added]
        self.registry.remove_at(source_index)

        logger.info(
            f"Merged {source.name!r} into {target.name!r}: "
            f"{len(added)} added, {len(skipped)} skipped"
        )
        self._publish_event(
            EventType.LISTS_MERGED,
            index=self.registry.index_of(target),
            list=target,
            source=source,
            added=added,
            skipped=skipped,
        )

        return MergeResult(
            target_name=target.name,
            source_name=source.name,
            added=added,
            skipped=skipped,
        )

    def merge_into_selected(self, source_index: int | None) -> MergeResult | None:
        """Merge a list into the currently selected one.

        Raises:
            InvalidMergeError: If nothing is selected or the indices are invalid
        """
        target_index = self.registry.selected_index
        if target_index is None and source_index is not None:
            raise InvalidMergeError(["No list is selected to merge into"])
        return self.merge(target_index, source_index)

    def candidates(self, target_index: int) -> list[tuple[int, RestaurantList]]:
        """Get the lists that may be merged into the target."""
        self.registry.get(target_index)
        return [
            (i, restaurant_list)
            for i, restaurant_list in enumerate(self.registry)
            if i != target_index
        ]


def merge_lists(
    registry: ListRegistry, target_index: int | None, source_index: int | None
) -> MergeResult | None:
    """Merge one list of a registry into another."""
    return MergeService(registry).merge(target_index, source_index)
