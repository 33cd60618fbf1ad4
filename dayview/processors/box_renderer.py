# File: dayview/processors/box_renderer.py
"""
Box descriptors for the rendering layer.

Turns positioned events into the sizes a renderer needs for one element per
event: pixel offsets vertically, percentages horizontally, with a fixed margin
kept free at the track edges.
"""

from dataclasses import dataclass
from typing import List, Optional

from dayview.models import LayoutConfig, PositionedEvent

RIGHT_EDGE_TOLERANCE = 0.001


@dataclass(frozen=True)
class EventBox:
    """Sizing for a single rendered event element."""
    element_id: str
    top: str
    height: str
    left: str
    width: str
    show_header: bool
    show_content: bool

    def to_dict(self) -> dict:
        return {
            'id': self.element_id,
            'top': self.top,
            'height': self.height,
            'left': self.left,
            'width': self.width,
            'show_header': self.show_header,
            'show_content': self.show_content,
        }


def format_number(value: float) -> str:
    """Print integral values without a trailing '.0' (100.0 -> '100')."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def is_left_aligned(event: PositionedEvent) -> bool:
    return event.left == 0


def is_right_aligned(event: PositionedEvent) -> bool:
    return (100 - (event.left + event.width)) < RIGHT_EDGE_TOLERANCE


def render_box(event: PositionedEvent, config: Optional[LayoutConfig] = None) -> EventBox:
    """
    Build the box for one positioned event.

    Full-width events keep the margin on both sides, events touching only the
    left or the right edge keep it on that side.
    """
    config = config or LayoutConfig()
    margin = config.edge_margin_px
    width = format_number(event.width)
    duration = event.end - event.start

    if event.width == 100:
        left_css = f"{margin}px"
        width_css = f"calc({width}% - {2 * margin}px)"
    elif is_left_aligned(event):
        left_css = f"{margin}px"
        width_css = f"calc({width}% - {margin}px)"
    else:
        left_css = f"{format_number(event.left)}%"
        if is_right_aligned(event):
            width_css = f"calc({width}% - {margin}px)"
        else:
            width_css = f"{width}%"

    return EventBox(
        element_id=str(event.id),
        top=f"{format_number(event.top)}px",
        height=f"{format_number(duration)}px",
        left=left_css,
        width=width_css,
        show_header=duration > config.header_min_minutes,
        show_content=duration > config.content_min_minutes,
    )


def render_boxes(events: List[PositionedEvent], config: Optional[LayoutConfig] = None) -> List[EventBox]:
    """Build boxes for a whole layout, in the given order."""
    config = config or LayoutConfig()
    return [render_box(event, config) for event in events]
