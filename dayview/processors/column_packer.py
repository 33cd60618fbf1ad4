# File: dayview/processors/column_packer.py
"""
Column packing within an overlap cluster.
"""

from typing import List

from dayview.models import Cluster, Column
from dayview.utils.logger import setup_logger

logger = setup_logger(__name__)


def pack_columns(cluster: Cluster) -> List[Column]:
    """
    Split a cluster into side-by-side columns.

    Walks the cluster in start order. Every event not yet placed seeds a new
    column; the rest of the cluster is then scanned once and any unplaced
    event starting at or after the column's current tail end is appended and
    becomes the new tail.

    The result is deterministic for a given input order. The members must
    already be ordered by start. When every member also has end > start,
    the column count equals the largest number of events active at one
    instant; a zero-length event still needs a column of its own inside a
    longer event it collides with.

    Example:
        >>> cluster = Cluster(0, (Event(1, 0, 60), Event(2, 30, 90), Event(3, 60, 120)))
        >>> [c.ids() for c in pack_columns(cluster)]
        [[1, 3], [2]]
    """
    events = cluster.events
    placed = set()
    columns: List[Column] = []

    for seed in range(len(events)):
        if seed in placed:
            continue

        column = Column(index=len(columns), events=[events[seed]])
        placed.add(seed)

        for candidate in range(seed + 1, len(events)):
            if candidate not in placed and column.accepts(events[candidate]):
                column.append(events[candidate])
                placed.add(candidate)

        columns.append(column)

    logger.debug(f"Cluster {cluster.index}: {len(events)} events packed into {len(columns)} columns")
    return columns
