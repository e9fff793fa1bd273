"""Pytest configuration and fixtures for gradient tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


@pytest.fixture
def black_to_color():
    from domain.sequence import ColorSequence

    return ColorSequence([(0, 0, 0, 255), (100, 200, 50, 255)])


@pytest.fixture
def three_step():
    from domain.sequence import ColorSequence

    return ColorSequence([(10, 20, 30), (40, 50, 60), (70, 80, 90)])
