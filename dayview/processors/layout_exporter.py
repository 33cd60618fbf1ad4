# File: dayview/processors/layout_exporter.py
"""
Layout output helpers.
Saves computed layouts as JSON and formats them for the console.
"""

import datetime
import json
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from dayview.models import PositionedEvent
from dayview.utils.logger import setup_logger

logger = setup_logger(__name__)


def save_layout(positioned: List[PositionedEvent], filepath: Path) -> bool:
    """
    Save layout JSON to file.

    Args:
        positioned: Positioned events to save
        filepath: Output file path (parent directories are created)

    Returns:
        True if successful, False otherwise
    """
    try:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        data_to_save = {
            "events": [event.to_dict() for event in positioned],
            "generated_at": datetime.datetime.now().isoformat()
        }

        with open(filepath, 'w', encoding="utf-8") as f:
            json.dump(data_to_save, f, indent=2, ensure_ascii=False)

        logger.info(f"Layout saved to {filepath}")
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Could not save layout: {e}", exc_info=True)
        return False


def format_layout(positioned: List[PositionedEvent]) -> str:
    """
    Render a plain-text table of a layout, grouped by cluster.

    Args:
        positioned: Positioned events (any order)

    Returns:
        Multi-line string
    """
    if not positioned:
        return "No events to display."

    clusters: Dict[int, List[PositionedEvent]] = defaultdict(list)
    for event in positioned:
        clusters[event.cluster_index].append(event)

    lines = ["=" * 60, "      DAY VIEW LAYOUT", "=" * 60]
    for cluster_index in sorted(clusters):
        members = clusters[cluster_index]
        lines.append(f"\nCLUSTER {cluster_index + 1} ({members[0].column_count} columns):")
        for event in sorted(members, key=lambda e: (e.column_index, e.start)):
            lines.append(
                f"  {event.start:>4} - {event.end:>4}  id={event.id!s:<6}"
                f" col {event.column_index + 1}/{event.column_count}"
                f"  left {event.left:6.2f}%  width {event.width:6.2f}%"
            )

    lines.append("\n" + "=" * 60)
    lines.append(f"Total Events: {len(positioned)} | Clusters: {len(clusters)}")
    lines.append("=" * 60)
    return "\n".join(lines)


def pretty_print_layout(positioned: List[PositionedEvent]) -> None:
    """Print a readable version of the layout."""
    if not positioned:
        logger.warning("No layout data to display")
    print(format_layout(positioned))
