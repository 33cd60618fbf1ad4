# File: tests/unit/test_layout_annotator.py
"""
Unit tests for layout geometry.
"""

import pytest
from dayview.models import Cluster, Column, Event
from dayview.processors.layout_annotator import annotate_cluster


class TestAnnotateCluster:
    """Tests for annotate_cluster."""

    def test_single_column_is_full_width(self):
        cluster = Cluster(4, (Event(1, 60, 150),))

        [positioned] = annotate_cluster(cluster, [Column(0, [Event(1, 60, 150)])])

        assert positioned.top == 60
        assert positioned.left == 0
        assert positioned.width == 100
        assert positioned.cluster_index == 4
        assert positioned.is_full_width()

    def test_two_columns(self, chain_events):
        e1, e2, e3 = chain_events
        cluster = Cluster(0, tuple(chain_events))
        columns = [Column(0, [e1, e3]), Column(1, [e2])]

        result = {p.id: p for p in annotate_cluster(cluster, columns)}

        assert (result[1].left, result[1].width) == (0, 50)
        assert (result[3].left, result[3].width) == (0, 50)
        assert (result[2].left, result[2].width) == (50, 50)
        assert result[3].top == 60

    def test_three_columns_keep_full_precision(self):
        events = [Event(1, 0, 10), Event(2, 0, 10), Event(3, 0, 10)]
        cluster = Cluster(0, tuple(events))
        columns = [Column(i, [e]) for i, e in enumerate(events)]

        result = annotate_cluster(cluster, columns)

        assert [p.width for p in result] == [100 / 3] * 3
        assert [p.left for p in result] == [0.0, 100 / 3, (100 / 3) * 2]
        assert 100 - (result[-1].left + result[-1].width) < 0.001
        assert result[1].left != round(result[1].left, 2)

    def test_widths_sum_to_track(self):
        events = [Event(i, 0, 10) for i in range(7)]
        columns = [Column(i, [e]) for i, e in enumerate(events)]

        result = annotate_cluster(Cluster(0, tuple(events)), columns)

        assert sum(p.width for p in result) == pytest.approx(100)
        assert all(p.column_count == 7 for p in result)
