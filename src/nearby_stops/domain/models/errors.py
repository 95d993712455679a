"""Failures surfaced by the stop feed and location collaborators."""


class NearbyStopsError(Exception):
    """Base class for failures reported to the view layer."""

    kind = "error"


class InputUnavailable(NearbyStopsError):
    """A coordinate or stop collection is missing."""

    kind = "input_unavailable"


class PermissionDenied(NearbyStopsError):
    """Location access was refused."""

    kind = "permission_denied"


class PositionUnavailable(NearbyStopsError):
    """The current position could not be determined."""

    kind = "position_unavailable"


class FeedUnavailable(NearbyStopsError):
    """The stop feed could not be reached or returned garbage."""

    kind = "feed_unavailable"
