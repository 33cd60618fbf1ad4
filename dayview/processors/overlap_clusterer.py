# File: dayview/processors/overlap_clusterer.py
"""
Overlap cluster detection.
Splits sorted events into connected components of the "overlaps" relation.
"""

from collections import deque
from typing import List

from dayview.models import Event, Cluster
from dayview.utils.logger import setup_logger

logger = setup_logger(__name__)


def has_collision(first: Event, second: Event) -> bool:
    """Strict interval intersection; a.end == b.start is not a collision."""
    return first.overlaps_with(second)


def find_collisions(events: List[Event], index: int) -> List[int]:
    """Indices of every other event colliding with events[index], in list order."""
    target = events[index]
    return [
        i for i, other in enumerate(events)
        if i != index and has_collision(target, other)
    ]


def cluster_events(sorted_events: List[Event]) -> List[Cluster]:
    """
    Partition events into overlap clusters.

    Each unvisited event (in sort order) starts a breadth-first traversal over
    collisions; everything reached forms one cluster. Events are tracked by
    their position in `sorted_events`, not by id.

    Every collision lookup rescans the whole list, so this is O(n^2) per
    cluster. Fine for a day's worth of events.

    Args:
        sorted_events: Events ordered by start

    Returns:
        Clusters in discovery order; members listed in sort order
    """
    visited = set()
    clusters: List[Cluster] = []

    for root in range(len(sorted_events)):
        if root in visited:
            continue

        members = {root}
        queue = deque([root])
        while queue:
            current = queue.popleft()
            for neighbour in find_collisions(sorted_events, current):
                if neighbour not in members:
                    members.add(neighbour)
                    queue.append(neighbour)

        visited.update(members)
        clusters.append(Cluster(
            index=len(clusters),
            events=tuple(sorted_events[i] for i in sorted(members)),
        ))

    logger.debug(f"Found {len(clusters)} clusters in {len(sorted_events)} events")
    return clusters
