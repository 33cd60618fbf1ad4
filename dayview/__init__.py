from .models import Event, PositionedEvent, LayoutConfig, LayoutReport, ValidationError
from .core.orchestrator import LayoutPipeline, LayoutPipelineFactory, layout, layout_with_report

__all__ = [
    "Event",
    "PositionedEvent",
    "LayoutConfig",
    "LayoutReport",
    "ValidationError",
    "LayoutPipeline",
    "LayoutPipelineFactory",
    "layout",
    "layout_with_report"
]
