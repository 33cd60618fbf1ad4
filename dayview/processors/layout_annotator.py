# File: dayview/processors/layout_annotator.py

from typing import List

from dayview.models import Cluster, Column, PositionedEvent


def annotate_cluster(cluster: Cluster, columns: List[Column]) -> List[PositionedEvent]:
    """
    Attach geometry to every event of a packed cluster.

    With k columns, an event in column i gets left = (100 / k) * i and
    width = 100 / k, both percentages of the track width. top is a copy of
    start. Values are not rounded.

    Returns:
        Positioned events, column by column
    """
    column_count = len(columns)
    width = 100 / column_count

    positioned: List[PositionedEvent] = []
    for column in columns:
        left = width * column.index
        for event in column.events:
            positioned.append(PositionedEvent(
                id=event.id,
                start=event.start,
                end=event.end,
                top=event.start,
                left=left,
                width=width,
                cluster_index=cluster.index,
                column_index=column.index,
                column_count=column_count,
            ))
    return positioned
