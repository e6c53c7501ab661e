"""Tests for the compositor-facing hue-dial record."""

import dataclasses
import logging

import numpy as np
import pytest

from huedial import defaults
from huedial.colorspace import find_max_chroma_color
from huedial.composition import CompositionData, Region, normalize_hue


class TestNormalizeHue:
    """Tests for normalize_hue()."""

    @pytest.mark.parametrize("hue,expected", [
        (0.0, 0.0),
        (42.5, 42.5),
        (360.0, 0.0),
        (370.0, 10.0),
        (-30.0, 330.0),
        (-720.0, 0.0),
    ])
    def test_wraps_into_range(self, hue, expected):
        assert normalize_hue(hue) == pytest.approx(expected)

    def test_result_in_range(self):
        for hue in np.linspace(-1000.0, 1000.0, 401):
            h = normalize_hue(float(hue))
            assert 0.0 <= h < 360.0


class TestCompositionData:
    """Tests for CompositionData."""

    def test_initial_layout(self, composition):
        assert composition.grid_size == (30, 30)
        assert composition.jc_region == Region(1, 1, 29, 29)
        assert composition.gradient_region == Region()
        assert composition.hue == defaults.DEFAULT_HUE

    def test_initial_color_is_red(self, composition):
        """Default hue is the red corner, so the swatch is P3 red."""
        np.testing.assert_allclose(tuple(composition.max_c_color), (1.0, 0.0, 0.0), atol=5e-4)

    def test_with_hue_recomputes_color(self, composition):
        updated = composition.with_hue(200.0)
        assert updated.hue == 200.0
        assert updated.max_c_color == find_max_chroma_color(200.0)
        assert updated.grid_size == composition.grid_size

    def test_with_hue_normalizes(self, composition):
        updated = composition.with_hue(-90.0)
        assert updated.hue == 270.0
        assert updated.max_c_color == find_max_chroma_color(270.0)

    def test_with_same_hue_returns_self(self, composition):
        assert composition.with_hue(composition.hue) is composition

    def test_original_unchanged(self, composition):
        before = composition.max_c_color
        composition.with_hue(120.0)
        assert composition.hue == defaults.DEFAULT_HUE
        assert composition.max_c_color == before

    def test_frozen(self, composition):
        with pytest.raises(dataclasses.FrozenInstanceError):
            composition.hue = 10.0

    def test_invalid_hue_raises(self, composition):
        with pytest.raises(ValueError):
            composition.with_hue(float('nan'))

    def test_update_logged(self, composition, caplog):
        with caplog.at_level(logging.DEBUG, logger="huedial.composition"):
            composition.with_hue(15.0)
        assert "max chroma" in caplog.text


def test_normalize_tiny_negative():
    """-1e-14 wraps to 0, not 360."""
    assert normalize_hue(-1e-14) == 0.0
