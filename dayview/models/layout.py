# File: dayview/models/layout.py

from dataclasses import dataclass, field
from typing import List, Tuple
from .event import Event


@dataclass(frozen=True)
class Cluster:
    """A maximal group of events connected by overlaps."""
    index: int
    events: Tuple[Event, ...]

    def __len__(self) -> int:
        return len(self.events)

    def ids(self) -> List:
        """Event ids in cluster order."""
        return [e.id for e in self.events]


@dataclass
class Column:
    """Mutually non-overlapping events of one cluster, drawn side by side with other columns."""
    index: int
    events: List[Event] = field(default_factory=list)

    @property
    def tail(self) -> Event:
        """Last event placed in the column."""
        return self.events[-1]

    def accepts(self, event: Event) -> bool:
        """Check if the event can follow the current tail."""
        return event.start >= self.tail.end

    def append(self, event: Event) -> None:
        self.events.append(event)

    def ids(self) -> List:
        return [e.id for e in self.events]
