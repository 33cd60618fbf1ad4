# File: dayview/models/config.py
"""
Data models for layout configuration.
"""

from dataclasses import dataclass

DEFAULT_WINDOW_MINUTES = 720  # 12-hour display window


@dataclass
class LayoutConfig:
    """Settings for the layout pipeline and the box renderer."""
    window_minutes: int = DEFAULT_WINDOW_MINUTES
    edge_margin_px: int = 10
    header_min_minutes: int = 29   # shorter events get no header
    content_min_minutes: int = 44  # shorter events get no content

    def __post_init__(self):
        """Validate settings."""
        if self.window_minutes <= 0:
            raise ValueError(f"Window must be positive: {self.window_minutes}")
        if self.edge_margin_px < 0:
            raise ValueError(f"Edge margin cannot be negative: {self.edge_margin_px}")

    @classmethod
    def from_dict(cls, data: dict) -> 'LayoutConfig':
        """Create LayoutConfig from dictionary (e.g., loaded from JSON)."""
        return cls(
            window_minutes=int(data.get('window_minutes', DEFAULT_WINDOW_MINUTES)),
            edge_margin_px=int(data.get('edge_margin_px', 10)),
            header_min_minutes=int(data.get('header_min_minutes', 29)),
            content_min_minutes=int(data.get('content_min_minutes', 44)),
        )

    def to_dict(self) -> dict:
        return {
            'window_minutes': self.window_minutes,
            'edge_margin_px': self.edge_margin_px,
            'header_min_minutes': self.header_min_minutes,
            'content_min_minutes': self.content_min_minutes,
        }
