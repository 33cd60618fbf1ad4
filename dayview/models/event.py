# File: dayview/models/event.py
"""
Data models for events on the day view timeline.
"""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Event:
    """A time-bounded event, offsets in minutes from the start of the window."""
    id: Number
    start: Number
    end: Number

    def duration_minutes(self) -> Number:
        """Length of the event on the timeline."""
        return self.end - self.start

    def overlaps_with(self, other: 'Event') -> bool:
        """Check if this event overlaps with another (touching endpoints don't count)."""
        return self.start < other.end and self.end > other.start

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {'id': self.id, 'start': self.start, 'end': self.end}


@dataclass(frozen=True)
class PositionedEvent:
    """An event with its computed geometry inside the day view track."""
    id: Number
    start: Number
    end: Number
    top: Number
    left: float
    width: float

    # Layout metadata
    cluster_index: int = 0
    column_index: int = 0
    column_count: int = 1

    @property
    def event(self) -> Event:
        """The underlying event, stripped of derived fields."""
        return Event(id=self.id, start=self.start, end=self.end)

    def is_full_width(self) -> bool:
        """True when the event is alone in its cluster."""
        return self.column_count == 1

    def to_dict(self) -> dict:
        """Convert to the public output record."""
        return {
            'id': self.id,
            'start': self.start,
            'end': self.end,
            'top': self.top,
            'left': self.left,
            'width': self.width,
        }
