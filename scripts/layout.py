"""
Day view layout entry point.

Usage:
    python scripts/layout.py [events.json] [output.json]

Reads events (default: config/events.json), computes the layout, prints it
and saves it as JSON (default: output/layout.json).
"""

import sys
import time
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dayview.core.orchestrator import LayoutPipelineFactory
from dayview.core.config_manager import Config
from dayview.processors.layout_exporter import save_layout, pretty_print_layout
from dayview.utils.logger import setup_logger

logger = setup_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    argv = sys.argv[1:] if argv is None else argv
    events_file = Path(argv[0]) if len(argv) > 0 else Config.EVENTS_FILE
    output_file = Path(argv[1]) if len(argv) > 1 else Config.LAYOUT_OUTPUT_FILE

    start_time = time.time()
    logger.info(f"Computing day view layout for {events_file}")

    try:
        pipeline = LayoutPipelineFactory.create()
        raw_events = Config.load_events(events_file)

        report = pipeline.run_with_report(raw_events)
        logger.info(
            f"Laid out {len(report.events)} events in {report.cluster_count} clusters "
            f"({len(report.errors)} excluded)"
        )

        pretty_print_layout(report.events)

        if not save_layout(report.events, output_file):
            return 1
        return 0

    except FileNotFoundError as e:
        logger.error(f"Missing required file: {e}")
        return 1

    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
