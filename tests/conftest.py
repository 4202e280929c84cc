"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

import pytest

# Add src and the repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from byte_size import Options


@pytest.fixture
def default_options():
    """Options with every field left at its default."""
    return Options()
