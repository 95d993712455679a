"""Disclosure state domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Collapsed:
    """A prefix of the ranked sequence is visible."""

    visible_count: int


@dataclass(frozen=True)
class Expanded:
    """Every ranked item is visible; only collapsing is offered."""


DisclosureState = Collapsed | Expanded
