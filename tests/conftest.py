# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable event data for all tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dayview.models import Event, LayoutConfig, PositionedEvent


# ==================== Event Fixtures ====================

@pytest.fixture
def demo_events():
    """The sample dataset shipped in config/events.json."""
    return [
        {'id': 1, 'start': 60, 'end': 150},
        {'id': 2, 'start': 520, 'end': 615},
        {'id': 3, 'start': 510, 'end': 570},
        {'id': 4, 'start': 540, 'end': 585},
        {'id': 5, 'start': 645, 'end': 705},
        {'id': 6, 'start': 600, 'end': 660},
        {'id': 7, 'start': 600, 'end': 660},
        {'id': 8, 'start': 0, 'end': 30},
    ]


@pytest.fixture
def chain_events():
    """Three events where 1-2 and 2-3 overlap but 1-3 only touch."""
    return [Event(1, 0, 60), Event(2, 30, 90), Event(3, 60, 120)]


@pytest.fixture
def malformed_events():
    """Records that each fail validation for a different reason."""
    return [
        {'id': '1', 'start': 0, 'end': 30},      # string id
        {'id': 2, 'start': None, 'end': 30},     # missing start
        {'id': 3, 'start': 0},                   # missing end
        {'id': 4, 'start': -5, 'end': 30},       # start below range
        {'id': 5, 'start': 720, 'end': 730},     # start at window end
        {'id': 6, 'start': 10, 'end': 0},        # end not positive
        {'id': 7, 'start': 10, 'end': 721},      # end past window
        {'id': True, 'start': 0, 'end': 30},     # bool id
    ]


@pytest.fixture
def layout_config():
    """Default layout configuration."""
    return LayoutConfig()


# ==================== Helper Fixtures ====================

@pytest.fixture
def create_positioned():
    """Factory fixture for creating positioned events."""
    def _create(
        event_id: int = 1,
        start: int = 0,
        end: int = 60,
        column_index: int = 0,
        column_count: int = 1,
        cluster_index: int = 0
    ) -> PositionedEvent:
        width = 100 / column_count
        return PositionedEvent(
            id=event_id,
            start=start,
            end=end,
            top=start,
            left=width * column_index,
            width=width,
            cluster_index=cluster_index,
            column_index=column_index,
            column_count=column_count,
        )

    return _create


@pytest.fixture
def assert_layout_valid():
    """Helper that checks the structural guarantees of a layout."""
    def _assert_valid(positioned):
        clusters = {}
        for p in positioned:
            clusters.setdefault(p.cluster_index, []).append(p)

        for members in clusters.values():
            column_count = members[0].column_count
            assert all(m.column_count == column_count for m in members)
            assert all(m.width == pytest.approx(100 / column_count) for m in members)
            assert len({m.column_index for m in members}) == column_count

            for a in members:
                assert a.top == a.start
                for b in members:
                    if a is not b and a.column_index == b.column_index:
                        assert not a.event.overlaps_with(b.event), (a, b)

        # Events in different clusters never overlap
        for a in positioned:
            for b in positioned:
                if a.cluster_index != b.cluster_index:
                    assert not a.event.overlaps_with(b.event)

    return _assert_valid


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
