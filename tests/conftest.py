"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- An empty league
- A league seeded with a couple of PSL teams
"""

import sys
from pathlib import Path

import pytest

# Project root must be importable so psl_scoreboard and main resolve
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from psl_scoreboard.league.league import League


@pytest.fixture
def league():
    """Create an empty League for testing."""
    return League()


@pytest.fixture
def seeded_league():
    """Create a League seeded with Pirates and Chiefs."""
    league = League()
    league.seed_teams(["Pirates", "Chiefs"])
    return league
