"""Test configuration for huedial."""

import pytest

from huedial.composition import CompositionData


@pytest.fixture
def composition():
    """Default composition record with its max-chroma color filled in."""
    return CompositionData.initial()
