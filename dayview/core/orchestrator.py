# File: dayview/core/orchestrator.py
"""
Main pipeline module for the day view layout engine.
Coordinates the stages that turn raw events into positioned events.

Stages run strictly forward: validate and dedupe -> sort -> cluster ->
pack columns -> annotate. Nothing here touches the caller's data or keeps
state between calls.
"""

from pathlib import Path
from typing import Any, List, Optional

from dayview.core.config_manager import Config
from dayview.utils.logger import setup_logger
from dayview.processors.event_validator import screen_events, sort_events
from dayview.processors.overlap_clusterer import cluster_events
from dayview.processors.column_packer import pack_columns
from dayview.processors.layout_annotator import annotate_cluster
from dayview.processors.box_renderer import EventBox, render_boxes
from dayview.models import LayoutConfig, LayoutReport, PositionedEvent

logger = setup_logger(__name__)


class LayoutPipeline:
    """
    Layout pipeline for a single day view track.

    Holds only its configuration; every run works on fresh records built
    from the input, so one instance can be shared freely.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize the pipeline.

        Args:
            config: Layout settings (default: window and margin from Config)
        """
        self.config = config or LayoutConfig(
            window_minutes=Config.WINDOW_MINUTES,
            edge_margin_px=Config.EDGE_MARGIN_PX
        )

    @property
    def window(self) -> int:
        return self.config.window_minutes

    def run(self, events: Any) -> List[PositionedEvent]:
        """
        Compute the layout, silently dropping malformed and duplicate records.

        Args:
            events: List of {id, start, end} mappings or Event objects

        Returns:
            Positioned events ordered by start
        """
        return self._execute(events).events

    def run_with_report(self, events: Any) -> LayoutReport:
        """
        Compute the layout and report every excluded record.

        Never raises for bad input; exclusions are listed in the report
        and logged as warnings.
        """
        report = self._execute(events)
        for error in report.errors:
            logger.warning(f"Excluded {error}")
        return report

    def render(self, positioned: List[PositionedEvent]) -> List[EventBox]:
        """Turn a computed layout into box descriptors for the renderer."""
        return render_boxes(positioned, self.config)

    def _execute(self, events: Any) -> LayoutReport:
        # Step 1: Validate and dedupe
        kept, errors = screen_events(events, self.window)

        # Step 2: Sort
        sorted_events = sort_events(kept)

        # Step 3: Cluster
        clusters = cluster_events(sorted_events)

        # Step 4 + 5: Pack and annotate
        positioned: List[PositionedEvent] = []
        for cluster in clusters:
            columns = pack_columns(cluster)
            positioned.extend(annotate_cluster(cluster, columns))

        # Ids are unique after dedupe
        order = {event.id: i for i, event in enumerate(sorted_events)}
        positioned.sort(key=lambda p: order[p.id])

        logger.debug(
            f"Layout complete: {len(positioned)} events in {len(clusters)} clusters "
            f"({len(errors)} excluded)"
        )
        return LayoutReport(events=positioned, errors=errors, cluster_count=len(clusters))


class LayoutPipelineFactory:
    """Factory for creating LayoutPipeline instances from configuration."""

    @staticmethod
    def create(config_file: Optional[Path] = None) -> LayoutPipeline:
        """
        Create a LayoutPipeline from the environment and config file.

        Returns:
            LayoutPipeline instance ready to run

        Raises:
            ValueError: If configuration is invalid
        """
        logger.info("Creating LayoutPipeline via factory")

        if not Config.validate():
            raise ValueError("Configuration validation failed. Check your .env and config/config.json.")

        config = Config.load_layout_config(config_file)
        logger.debug(f"Layout window: {config.window_minutes} minutes")
        return LayoutPipeline(config)


def layout(events: Any, window: Optional[int] = None) -> List[PositionedEvent]:
    """
    Compute the day view layout for a list of events.

    Example:
        >>> [(p.id, p.left, p.width) for p in layout([{'id': 1, 'start': 0, 'end': 60},
        ...                                          {'id': 2, 'start': 30, 'end': 90}])]
        [(1, 0.0, 50.0), (2, 50.0, 50.0)]
    """
    return _pipeline_for(window).run(events)


def layout_with_report(events: Any, window: Optional[int] = None) -> LayoutReport:
    """Same as layout(), also returning the excluded records."""
    return _pipeline_for(window).run_with_report(events)


def _pipeline_for(window: Optional[int]) -> LayoutPipeline:
    if window is None:
        return LayoutPipeline()
    return LayoutPipeline(LayoutConfig(window_minutes=window, edge_margin_px=Config.EDGE_MARGIN_PX))
