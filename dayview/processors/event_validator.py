# File: dayview/processors/event_validator.py
"""
Input screening for the layout pipeline.
Filters malformed records, drops duplicate ids and orders events by start.
"""

import math
from numbers import Integral, Real
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple

from dayview.models import Event, ValidationError, DEFAULT_WINDOW_MINUTES
from dayview.utils.logger import setup_logger

logger = setup_logger(__name__)

EVENT_FIELDS = ('id', 'start', 'end')


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid offset or id
    return isinstance(value, Real) and not isinstance(value, bool)


def _read_field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def check_record(record: Any, window: int = DEFAULT_WINDOW_MINUTES) -> Optional[Tuple[str, str]]:
    """
    Check a single raw record.

    Returns:
        None if the record is valid, otherwise a (field, message) tuple
        describing the first failed check.
    """
    for name in EVENT_FIELDS:
        value = _read_field(record, name)
        if not _is_number(value):
            return name, f"expected a number, got {type(value).__name__}"

    event_id = _read_field(record, 'id')
    # Integers are always finite and may be too large for float()
    if not isinstance(event_id, Integral) and not math.isfinite(event_id):
        return 'id', f"id must be finite, got {event_id!r}"

    start = _read_field(record, 'start')
    end = _read_field(record, 'end')
    if not (0 <= start < window):
        return 'start', f"start {start!r} outside [0, {window})"
    if not (0 < end <= window):
        return 'end', f"end {end!r} outside (0, {window}]"

    return None


def _validated(
    raw_events: Any,
    window: int,
    errors: Optional[List[ValidationError]]
) -> Iterator[Tuple[int, Event]]:
    """Yield (input index, Event) for every valid record, recording rejects in `errors`."""
    if not isinstance(raw_events, (list, tuple)):
        logger.debug(f"Ignoring non-list input of type {type(raw_events).__name__}")
        return

    for i, record in enumerate(raw_events):
        problem = check_record(record, window)
        if problem is None:
            yield i, Event(
                id=_read_field(record, 'id'),
                start=_read_field(record, 'start'),
                end=_read_field(record, 'end'),
            )
            continue

        field_name, message = problem
        event_id = _read_field(record, 'id')
        logger.debug(f"Dropping entry {i} (id={event_id!r}): {field_name}: {message}")
        if errors is not None:
            errors.append(ValidationError(field_name, message, entry_index=i, event_id=event_id))


def _first_by_id(
    indexed: Iterable[Tuple[int, Event]],
    errors: Optional[List[ValidationError]]
) -> Iterator[Tuple[int, Event]]:
    """Yield the first (index, Event) for every id, recording later repeats in `errors`."""
    seen = set()
    for i, event in indexed:
        if event.id in seen:
            logger.debug(f"Dropping entry {i}: duplicate id {event.id!r}")
            if errors is not None:
                errors.append(ValidationError('id', f"duplicate id {event.id!r}", entry_index=i, event_id=event.id))
            continue
        seen.add(event.id)
        yield i, event


def validate_events(raw_events: Any, window: int = DEFAULT_WINDOW_MINUTES) -> List[Event]:
    """
    Keep only well-formed records, in input order.

    A record is kept when id, start and end are numbers, 0 <= start < window
    and 0 < end <= window. Anything else is silently dropped; non-list input
    yields an empty list.

    Example:
        >>> validate_events([{'id': 1, 'start': 0, 'end': 30}, {'id': 'x', 'start': 0, 'end': 30}])
        [Event(id=1, start=0, end=30)]
    """
    return [event for _, event in _validated(raw_events, window, None)]


def dedupe_events(events: List[Event]) -> List[Event]:
    """Keep the first event for every id, preserving input order."""
    return [event for _, event in _first_by_id(enumerate(events), None)]


def sort_events(events: List[Event]) -> List[Event]:
    """Order events by start. The sort is stable: equal starts keep their input order."""
    return sorted(events, key=lambda e: e.start)


def screen_events(
    raw_events: Any,
    window: int = DEFAULT_WINDOW_MINUTES
) -> Tuple[List[Event], List[ValidationError]]:
    """
    Validate and dedupe raw records, reporting every exclusion.

    Runs the same checks as validate_events followed by dedupe_events, keeping
    input positions so each exclusion can be reported against its entry.

    Args:
        raw_events: List of mappings or objects with id/start/end
        window: Upper bound of the timeline

    Returns:
        Tuple of (kept events in input order, list of ValidationError)
    """
    errors: List[ValidationError] = []
    kept = [event for _, event in _first_by_id(_validated(raw_events, window, errors), errors)]
    return kept, errors
