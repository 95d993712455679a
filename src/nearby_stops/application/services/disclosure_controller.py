"""Progressive disclosure of a ranked sequence.

The state is either ``Collapsed(visible_count)``, showing a prefix of the
sequence with a "show more" control, or ``Expanded``, showing everything
with only a "collapse" control. Transitions are pure functions so they can
be tested without a view; ``DisclosureController`` holds the state for one
view.
"""

from collections.abc import Sequence
from typing import TypeVar

from nearby_stops.domain.models.disclosure_settings import DisclosureSettings
from nearby_stops.domain.models.disclosure_state import Collapsed, DisclosureState, Expanded

T = TypeVar("T")

DEFAULT_SETTINGS = DisclosureSettings()


def initialize(total: int, settings: DisclosureSettings = DEFAULT_SETTINGS) -> DisclosureState:
    """State for a freshly received sequence of ``total`` items."""
    return Collapsed(visible_count=min(settings.initial_visible, max(total, 0)))


def show_more(
    state: DisclosureState, total: int, settings: DisclosureSettings = DEFAULT_SETTINGS
) -> DisclosureState:
    """Reveal one more item, or everything once the threshold is reached."""
    if isinstance(state, Expanded):
        return state
    if state.visible_count >= total:
        return state
    next_count = state.visible_count + 1
    if state.visible_count < settings.max_incremental_visible - 1 and next_count < total:
        return Collapsed(visible_count=next_count)
    return Expanded()


def collapse(
    state: DisclosureState, total: int, settings: DisclosureSettings = DEFAULT_SETTINGS
) -> DisclosureState:
    """Go back to the initial prefix from the expanded state."""
    if isinstance(state, Expanded):
        return initialize(total, settings)
    return state


def visible_count(state: DisclosureState, total: int) -> int:
    """Number of items currently shown."""
    if isinstance(state, Expanded):
        return total
    return min(state.visible_count, total)


def can_show_more(state: DisclosureState, total: int) -> bool:
    return isinstance(state, Collapsed) and state.visible_count < total


def can_collapse(state: DisclosureState) -> bool:
    return isinstance(state, Expanded)


def visible_items(items: Sequence[T], state: DisclosureState) -> list[T]:
    """The disclosed prefix of items."""
    return list(items[: visible_count(state, len(items))])


class DisclosureController:
    """Owns the disclosure state for one ranked sequence."""

    def __init__(self, settings: DisclosureSettings | None = None) -> None:
        """Initialize with an empty sequence.

        Args:
            settings: Disclosure thresholds, defaults to 2 and 5.
        """
        self.settings = settings or DEFAULT_SETTINGS
        self._items: list = []
        self._state: DisclosureState = initialize(0, self.settings)

    @property
    def state(self) -> DisclosureState:
        return self._state

    @property
    def items(self) -> list:
        return list(self._items)

    @property
    def total(self) -> int:
        return len(self._items)

    def reset(self, items: Sequence) -> None:
        """Replace the sequence and start over from the initial prefix."""
        self._items = list(items)
        self._state = initialize(len(self._items), self.settings)

    def show_more(self) -> DisclosureState:
        self._state = show_more(self._state, self.total, self.settings)
        return self._state

    def collapse(self) -> DisclosureState:
        self._state = collapse(self._state, self.total, self.settings)
        return self._state

    @property
    def visible(self) -> list:
        return visible_items(self._items, self._state)

    @property
    def can_show_more(self) -> bool:
        return can_show_more(self._state, self.total)

    @property
    def can_collapse(self) -> bool:
        return can_collapse(self._state)
