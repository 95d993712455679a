"""Parser for stop feed payloads."""

import logging
from typing import Any

from pydantic import ValidationError

from nearby_stops.domain.models.stop_record import StopRecord

logger = logging.getLogger(__name__)


def _iter_entries(payload: Any) -> list[Any]:
    """Flatten the payload shapes a JSON feed can deliver.

    Firebase exports a node either as an object keyed by push id or, when the
    keys are small integers, as an array that may contain null holes.
    """
    if payload is None:
        return []
    if isinstance(payload, dict):
        # A single record rather than a collection
        if "stopId" in payload and "stopName" in payload:
            return [payload]
        return list(payload.values())
    if isinstance(payload, list):
        return payload
    raise ValueError(f"Unexpected stop feed payload type: {type(payload).__name__}")


def parse_stop_records(payload: Any) -> list[StopRecord] | None:
    """Parse a feed payload into stop records, skipping malformed entries.

    Args:
        payload: Decoded JSON from the feed.

    Returns:
        Parsed records in feed order, or None if the payload held no data.

    Raises:
        ValueError: The payload is neither null, an object nor an array.
    """
    if payload is None:
        return None

    records: list[StopRecord] = []
    skipped = 0
    for entry in _iter_entries(payload):
        if entry is None:
            continue
        if not isinstance(entry, dict):
            skipped += 1
            continue
        try:
            records.append(StopRecord.model_validate(entry))
        except ValidationError as e:
            skipped += 1
            logger.warning(
                f"Skipping malformed stop record {entry.get('stopId', '?')}: "
                f"{e.error_count()} validation error(s)"
            )

    if skipped:
        logger.warning(f"Skipped {skipped} malformed stop record(s)")
    logger.debug(f"Parsed {len(records)} stop records")
    return records
