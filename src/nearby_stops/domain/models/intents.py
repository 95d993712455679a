"""User intents sent by the view layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShowMore:
    """Reveal one more ranked stop."""


@dataclass(frozen=True)
class Collapse:
    """Return to the initial number of visible stops."""


@dataclass(frozen=True)
class Refresh:
    """Resample the position and rerank."""


@dataclass(frozen=True)
class QueryChanged:
    """The search text changed."""

    text: str


@dataclass(frozen=True)
class SelectStop:
    """A stop was picked from a list."""

    stop_id: str


Intent = ShowMore | Collapse | Refresh | QueryChanged | SelectStop
