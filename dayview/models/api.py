# File: dayview/models/api.py
"""
Data models for layout results and validation reports.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional
from .event import PositionedEvent


@dataclass
class ValidationError:
    """Represents an input record excluded from the layout."""
    field: str
    message: str
    entry_index: Optional[int] = None
    event_id: Any = None

    def __str__(self) -> str:
        """String representation of error."""
        if self.entry_index is not None:
            return f"Entry {self.entry_index} (id={self.event_id!r}) - {self.field}: {self.message}"
        return f"{self.field}: {self.message}"


@dataclass
class LayoutReport:
    """Layout output together with the records that were dropped on the way."""
    events: List[PositionedEvent] = field(default_factory=list)
    errors: List[ValidationError] = field(default_factory=list)
    cluster_count: int = 0

    def is_clean(self) -> bool:
        """True when every input record made it into the layout."""
        return not self.errors

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'events': [e.to_dict() for e in self.events],
            'excluded': [
                {
                    'entry_index': err.entry_index,
                    'id': err.event_id,
                    'field': err.field,
                    'message': err.message,
                }
                for err in self.errors
            ],
            'cluster_count': self.cluster_count,
        }
