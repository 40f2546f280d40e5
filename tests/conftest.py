"""
Shared pytest fixtures for escape room tests.

This module provides:
- room: A RecordingRoom with a five-turn limit
- lever: An item that is also a command handler
- app: An EscapeApp driving the room
- Custom markers for test categorization
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from escaperoom.engine.app import EscapeApp  # noqa: E402
from tests.mocks.rooms import Lever, Pebble, RecordingRoom  # noqa: E402


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as full-scenario integration tests"
    )


# =============================================================================
# Room Fixtures
# =============================================================================


@pytest.fixture
def room() -> RecordingRoom:
    """Create an empty five-turn test room."""
    return RecordingRoom(max_turns=5)


@pytest.fixture
def lever() -> Lever:
    """Create a handler-capable item."""
    return Lever()


@pytest.fixture
def pebbles() -> list[Pebble]:
    """Create three plain items with distinct names."""
    return [Pebble("red_pebble"), Pebble("blue_pebble"), Pebble("green_pebble")]


@pytest.fixture
def app(room: RecordingRoom) -> EscapeApp:
    """Create an app driving the test room, with scripted input disabled."""

    def no_input() -> str:
        raise EOFError

    return EscapeApp(room, read_command=no_input)
