from .event import Event, PositionedEvent
from .layout import Cluster, Column
from .config import LayoutConfig, DEFAULT_WINDOW_MINUTES
from .api import ValidationError, LayoutReport

__all__ = [
    "Event",
    "PositionedEvent",
    "Cluster",
    "Column",
    "LayoutConfig",
    "DEFAULT_WINDOW_MINUTES",
    "ValidationError",
    "LayoutReport"
]
